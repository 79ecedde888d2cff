class SiteTariffsError(Exception): ...


class SeriesError(SiteTariffsError): ...


class RangeError(SiteTariffsError): ...


class TariffUnavailableError(SiteTariffsError): ...


class ConfigError(SiteTariffsError): ...


def require(
    condition: bool, message: str, exc: type[SiteTariffsError] = SiteTariffsError
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
