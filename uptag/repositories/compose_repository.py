import os

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from uptag.models.compose import BuildContext, ComposeFile, ComposeService, ComposeServiceEntry
from uptag.repositories.annotation import find_annotation
from uptag.utils.yaml_loader import get_yaml_instance


class ComposeRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[ComposeServiceEntry]:
        with open(self.file_path, "r") as f:
            text = f.read()
        try:
            data = self.yaml.load(text)
            parsed = ComposeFile(**data)
        except (YAMLError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid compose file structure: {e}") from e

        lines = text.splitlines()
        return [
            self._entry(name, service, data["services"][name], lines)
            for name, service in parsed.services.items()
        ]

    def _entry(self, name: str, service: ComposeService, raw_service, lines: list[str]) -> ComposeServiceEntry:
        # with both keys present, `image` only names the result of the build
        if service.build is not None:
            return ComposeServiceEntry(name=name, dockerfile=self._dockerfile_path(service.build))
        if service.image is not None:
            position = (raw_service.lc.data or {}).get("image")
            if position is None:
                # merged in through `<<:`, there is no line of its own to annotate
                return ComposeServiceEntry(name=name, image=service.image)
            # ruamel line numbers are zero based, so this is the line above `image:`
            line = position[0]
            previous = lines[line - 1] if line > 0 else None
            return ComposeServiceEntry(name=name, image=service.image, pattern=find_annotation(previous), line=line + 1)
        return ComposeServiceEntry(name=name)

    def _dockerfile_path(self, build: str | BuildContext) -> str:
        if isinstance(build, str):
            build = BuildContext(context=build)
        base_dir = os.path.dirname(os.path.abspath(self.file_path))
        return os.path.normpath(os.path.join(base_dir, build.context, build.dockerfile))
