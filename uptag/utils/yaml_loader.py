from ruamel.yaml import YAML


def get_yaml_instance() -> YAML:
    # round-trip mode keeps the services in file order and records key line numbers
    yaml = YAML(typ="rt")
    yaml.preserve_quotes = True
    yaml.allow_duplicate_keys = False
    return yaml
