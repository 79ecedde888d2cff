from . import (
    canon,
    exceptions,
    types,
    schema,
    config,
    utils,
    validate,
    ingest,
    formats,
    energy,
    greenshare,
    tariffs,
    forecast,
    publish,
)

__all__ = [
    "canon",
    "exceptions",
    "types",
    "schema",
    "config",
    "utils",
    "validate",
    "ingest",
    "formats",
    "energy",
    "greenshare",
    "tariffs",
    "forecast",
    "publish",
]
