import importlib
from .contrib import __version__, __author__, __email__, __license__

# lazy loading/importing keeps the commandline interface fast.
# a sub-module is only loaded upon first access to it.
# >>> import cbremap # <- fast
# >>> cbremap.lookup # <- imports cbremap.lookup (and cbremap.mutate)

__all__ = [
    "mutate",
    "lookup",
    "collapse",
    "remap",
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]

_lazy_modules = {
    "mutate": ".mutate",
    "lookup": ".lookup",
    "collapse": ".collapse",
    "remap": ".remap",
}


def __getattr__(name):
    g = globals()
    if name in g:
        # we already loaded this before. Don't even go through importlib at all
        return g[name]

    elif name in _lazy_modules:

        # first access. Need to load
        mod = importlib.import_module(_lazy_modules[name], __name__)
        globals()[name] = mod
        return mod

    else:
        # re-create normal error behavior
        raise AttributeError(f"module {__name__} has no attribute {name}")
