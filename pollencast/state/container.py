"""Screen state container: drives one fetch cycle at a time and notifies observers.

Re-triggering a fetch while another is in flight starts a new cycle; when the
older cycle's result arrives it is discarded, so the last trigger wins. The
outgoing request itself is not cancelled.
"""

import logging
from collections.abc import Callable

from pollencast.config.schema import AppConfig
from pollencast.ingest.pollen_client import PollenClient
from pollencast.ingest.repository import ForecastRepository
from pollencast.models.result import Ok
from pollencast.models.state import Failed, Idle, Loaded, Loading, ScreenState

logger = logging.getLogger(__name__)

Observer = Callable[[ScreenState], None]


class ForecastStateContainer:
    def __init__(self, repository: ForecastRepository):
        self.repository = repository
        self._state: ScreenState = Idle()
        self._observers: list[Observer] = []
        self._generation = 0

    @property
    def state(self) -> ScreenState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer for every subsequent transition.

        Returns a callable that removes the observer.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def fetch(self) -> ScreenState:
        """Run a Loading cycle and return the state once it settles.

        If the repository raises, the state before this cycle is restored
        (Idle if that was itself Loading) and the exception propagates.
        """
        self._generation += 1
        generation = self._generation
        previous = self._state
        self._set_state(Loading())

        try:
            result = self.repository.fetch()
        except Exception:
            if generation == self._generation:
                logger.exception("Forecast fetch %d raised", generation)
                self._set_state(Idle() if isinstance(previous, Loading) else previous)
            raise

        if generation != self._generation:
            logger.info(
                "Discarding result of superseded fetch %d (current %d)",
                generation, self._generation,
            )
            return self._state

        if isinstance(result, Ok):
            self._set_state(Loaded(result.value))
        else:
            self._set_state(Failed(result.failure))
        return self._state

    def reset(self) -> None:
        """Return to Idle; a result still in flight will be discarded."""
        self._generation += 1
        self._set_state(Idle())

    def _set_state(self, state: ScreenState) -> None:
        logger.debug("Screen state %s -> %s", self._state.status, state.status)
        self._state = state
        for observer in list(self._observers):
            observer(state)


def build_container(config: AppConfig) -> ForecastStateContainer:
    """Wire client, repository and container from config."""
    client = PollenClient.from_config(config)
    return ForecastStateContainer(ForecastRepository(client))
