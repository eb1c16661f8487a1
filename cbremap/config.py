import os
import logging

from cbremap.errors import ConfigVariableError

logger_name = "cbremap.config"


class ConfigFile:
    initial_config_path = os.path.join(
        os.path.dirname(__file__), "data/config/config.yaml"
    )

    # variable name -> (type, description used in error messages)
    variable_types = {
        "barcode_length": (int, "a positive integer"),
        "nucleotides": (str, "a string of at least two distinct symbols"),
        "wildcard": (str, "a single symbol which is not one of the nucleotides"),
        "n_barcodes_use": (int, "a non-negative integer"),
    }

    def __init__(self):
        self.variables = {
            "barcode_length": 12,
            "nucleotides": "ACGT",
            "wildcard": "N",
            "n_barcodes_use": 1000,
        }
        self.file_path = "cbremap.yaml"
        self.logger = logging.getLogger(logger_name)

    @classmethod
    def from_yaml(cls, file_path="cbremap.yaml"):
        cf = cls()
        import yaml

        config_yaml_variables = None
        with open(file_path, "r") as f:
            try:
                config_yaml_variables = yaml.load(f, Loader=yaml.FullLoader)
            except yaml.YAMLError as err:
                raise ConfigVariableError(file_path, str(err), expected="valid YAML")

        if config_yaml_variables is not None:
            if not isinstance(config_yaml_variables, dict):
                raise ConfigVariableError(
                    file_path, config_yaml_variables, expected="a YAML mapping"
                )
            cf.variables.update(config_yaml_variables)

        cf.file_path = file_path

        if file_path != cf.initial_config_path:
            initial_config = ConfigFile.from_yaml(cf.initial_config_path)

            # check which variables do not exist, if they dont,
            # copy them from initial config
            for variable in cf.variable_types:
                if variable not in (config_yaml_variables or {}):
                    cf.variables[variable] = initial_config.variables[variable]

        cf.check()
        cf.logger.debug(f"loaded configuration from '{file_path}'")
        return cf

    def check(self):
        for name, (var_type, expected) in self.variable_types.items():
            value = self.variables[name]
            # bool is an int subclass, but "barcode_length: yes" is no length
            if not isinstance(value, var_type) or isinstance(value, bool):
                raise ConfigVariableError(name, value, expected=expected)

        if self.variables["barcode_length"] < 1:
            raise ConfigVariableError(
                "barcode_length",
                self.variables["barcode_length"],
                expected=self.variable_types["barcode_length"][1],
            )

        if self.variables["n_barcodes_use"] < 0:
            raise ConfigVariableError(
                "n_barcodes_use",
                self.variables["n_barcodes_use"],
                expected=self.variable_types["n_barcodes_use"][1],
            )

        nts = self.variables["nucleotides"]
        if len(nts) < 2 or len(set(nts)) != len(nts):
            raise ConfigVariableError(
                "nucleotides", nts, expected=self.variable_types["nucleotides"][1]
            )

        wildcard = self.variables["wildcard"]
        if len(wildcard) != 1 or wildcard in nts:
            raise ConfigVariableError(
                "wildcard", wildcard, expected=self.variable_types["wildcard"][1]
            )

    def __getitem__(self, key):
        return self.variables[key]

    def get(self, key, default=None):
        return self.variables.get(key, default)


def load_config_with_fallbacks(args, try_yaml="cbremap.yaml"):
    """
    Tries to load cbremap configuration from
        1) args.config
        2) try_yaml
        3) builtin default from cbremap package
    """
    logger = logging.getLogger(logger_name)

    config_path = getattr(args, "config", None)
    if config_path:
        if not os.access(config_path, os.R_OK):
            raise ConfigVariableError(
                "--config", config_path, expected="a readable YAML file"
            )
    elif os.access(try_yaml, os.R_OK):
        config_path = try_yaml
    else:
        config_path = ConfigFile.initial_config_path

    logger.info(f"using configuration from '{config_path}'")
    return ConfigFile.from_yaml(config_path)
