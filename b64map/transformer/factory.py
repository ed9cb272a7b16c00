from b64map.config.settings import Settings
from b64map.transformer.base import BaseProcessRunner
from b64map.transformer.concurrent_runner import ConcurrentProcessRunner
from b64map.transformer.sequential_runner import SequentialProcessRunner


class ProcessRunnerFactory:
    """Creates the subprocess I/O strategy selected in settings."""

    ADAPTERS: dict[str, type[BaseProcessRunner]] = {
        "sequential": SequentialProcessRunner,
        "concurrent": ConcurrentProcessRunner,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseProcessRunner:
        strategy = settings.io_strategy.lower()
        runner_cls = cls.ADAPTERS.get(strategy)
        if runner_cls is None:
            raise ValueError(
                f"Unknown I/O strategy '{strategy}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return runner_cls()
