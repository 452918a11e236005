"""
Process-wide defaults. They only affect values built afterwards.

* ``dtype``: float width used when the inputs carry none.
* ``float_errors``: ``numpy.errstate`` mode for IEEE exceptional conditions.
"""
from contextlib import contextmanager

# "call" and "log" need an errcall object, which is not configurable here
errstate_modes = ("ignore", "warn", "raise", "print")


class ConfigManager(dict):
    def __init__(self, default):
        super().__init__(default)
        self.checks = {}


def create_config(default):
    _config = ConfigManager(default)

    def set_(name, var):
        """
        set a configuration, running its check first.
        """
        if name not in _config:
            raise Exception("No configuration named {} found.".format(name))
        check = _config.checks.get(name)
        if check is not None:
            check(var)
        _config[name] = var

    def get_(name):
        """
        get a configuration.
        """
        if name in _config:
            return _config[name]
        raise Exception("No configuration named {} found.".format(name))

    def regist_(name, var, check=None):
        """
        regist a configuration, ``check(var)`` should raise for invalid
        values.
        """
        if name in _config:
            raise Exception(
                "Configuration named {} already exists.".format(name)
            )
        if check is not None:
            check(var)
            _config.checks[name] = check
        _config[name] = var
        return var

    def check_(name):
        """
        decorator, register the check of an existing configuration.
        """

        def wrapper(f):
            _config.checks[name] = f
            return f

        return wrapper

    return set_, get_, regist_, check_


set_config, get_config, regist_config, regist_config_check = create_config(
    {"dtype": "float64", "float_errors": "ignore"}
)


@regist_config_check("float_errors")
def _check_float_errors(var):
    if var not in errstate_modes:
        raise ValueError(
            "float_errors should be one of {}, got {!r}".format(
                errstate_modes, var
            )
        )


@contextmanager
def temp_config(name, var):
    tmp = get_config(name)
    set_config(name, var)
    try:
        yield var
    finally:
        set_config(name, tmp)


using_dtype = lambda var: temp_config("dtype", var)
