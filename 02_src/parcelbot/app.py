"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import DialogueSettings
from .dialogue.agent import DialogueAgent, IDialogueAgent
from .logging_config import get_logger
from .scheduler import AsyncioScheduler, IScheduler
from .tracker import ITracker, Tracker
from .transcript import Transcript

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Throw the conversation away and greet again."""
        ...

    @property
    def dialogue_agent(self) -> IDialogueAgent: ...

    @property
    def transcript(self) -> Transcript: ...

    @property
    def tracker(self) -> ITracker: ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: DialogueSettings | None = None,
        scheduler: IScheduler | None = None,
    ):
        self._settings = settings or DialogueSettings.from_env()
        self._scheduler_override = scheduler

        # Components (will be initialized in start())
        self._transcript: Transcript | None = None
        self._tracker: Tracker | None = None
        self._scheduler: IScheduler | None = None
        self._dialogue_agent: DialogueAgent | None = None

    @property
    def settings(self) -> DialogueSettings:
        return self._settings

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Transcript and Tracker (no dependencies)
        self._transcript = Transcript()
        self._tracker = Tracker(max_events=self._settings.trace_buffer_size)

        # 2. Scheduler (needs the running loop only when a timer is armed)
        self._scheduler = self._scheduler_override or AsyncioScheduler()

        # 3. DialogueAgent (depends on all of the above)
        self._dialogue_agent = DialogueAgent(
            sink=self._transcript,
            scheduler=self._scheduler,
            tracker=self._tracker,
            settings=self._settings,
        )
        await self._dialogue_agent.start()
        logger.info("DialogueAgent started")
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._dialogue_agent:
            await self._dialogue_agent.stop()
        if self._scheduler:
            self._scheduler.shutdown()
            logger.info("Scheduler shut down")

    async def reset(self) -> None:
        """Throw the conversation away and greet again."""
        if not self._dialogue_agent:
            raise RuntimeError("Application not started")

        if self._transcript is not None:
            self._transcript.clear()
        if self._tracker:
            self._tracker.clear()
        await self._dialogue_agent.reset()
        logger.info("Reset complete")

    @property
    def dialogue_agent(self) -> DialogueAgent:
        """Get dialogue agent instance."""
        if not self._dialogue_agent:
            raise RuntimeError("Application not started")
        return self._dialogue_agent

    @property
    def transcript(self) -> Transcript:
        """Get transcript instance."""
        if self._transcript is None:
            raise RuntimeError("Application not started")
        return self._transcript

    @property
    def tracker(self) -> Tracker:
        """Get tracker instance."""
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker
