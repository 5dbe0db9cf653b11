from .compose import BuildContext, ComposeFile, ComposeService, ComposeServiceEntry
from .image import FromStatement, Image, ImageName
from .pattern import Literal, Pattern, Slot, SlotKind
from .report import Bucket, Report, UpdateLevel
from .resolution import CurrentTagStatus, Found, NotEncountered, Resolution, UpdateOutcome
from .version import UpdateType, Version

__all__ = [
    "BuildContext",
    "ComposeFile",
    "ComposeService",
    "ComposeServiceEntry",
    "FromStatement",
    "Image",
    "ImageName",
    "Literal",
    "Pattern",
    "Slot",
    "SlotKind",
    "Bucket",
    "Report",
    "UpdateLevel",
    "CurrentTagStatus",
    "Found",
    "NotEncountered",
    "Resolution",
    "UpdateOutcome",
    "UpdateType",
    "Version",
]
