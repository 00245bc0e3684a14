"""DogNZB API service wrapper."""

from ...api.dognzb import DogNZBApi
from ...api.transport import DEFAULT_TIMEOUT, SessionGetter


class DogNZBService:
    """
    DogNZB API service wrapper with context manager support.

    Owns the HTTP session behind the client and closes it on exit.
    """

    def __init__(self, api: DogNZBApi, getter: SessionGetter):
        """
        Initialize DogNZB service.

        Args:
            api: DogNZBApi instance
            getter: Transport the API issues requests through
        """
        self._api = api
        self._getter = getter

    @classmethod
    def from_config(cls, config, api_key: str):
        """
        Create DogNZBService from configuration.

        Args:
            config: Config object
            api_key: Resolved DogNZB API key

        Returns:
            DogNZBService instance
        """
        getter = SessionGetter(timeout=config.get("dognzb.timeout", DEFAULT_TIMEOUT))
        api = DogNZBApi(
            api_key=api_key,
            getter=getter,
            url=config.get("dognzb.url", DogNZBApi.BASE_URL),
        )
        return cls(api, getter)

    def __enter__(self):
        """Enter context manager - return API instance."""
        return self._api

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager - close the HTTP session."""
        self._getter.close()
        return False
