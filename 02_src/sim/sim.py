"""SIM implementation - scripted conversations replayed over the HTTP API."""

import asyncio
from typing import Protocol

import httpx

from parcelbot.logging_config import get_logger
from parcelbot.tracker import ITracker

logger = get_logger(__name__)

# The greeting is sent by the server on startup/reset, so scripts start
# with the user's first answer.
SCENARIOS: dict[str, list[str]] = {
    "delivered": ["yes", "AB123456789CD", "yes"],
    "inactive_number": ["yes", "AB000000000CD", "yes"],
    "unknown_order": ["no", "not-an-email-or-number", "no"],
    "escalation": [
        "yes",
        "123",
        "toolongtoolongtoolongtoolong1234567890",
        "!!!not-valid!!!",
        "yeah",
    ],
}


class ISim(Protocol):
    """Generate test conversations."""

    async def start(self) -> None:
        """Start replaying scenarios."""
        ...

    async def stop(self) -> None:
        """Stop replaying."""
        ...


class Sim:
    """Replays SCENARIOS against a running API, one after another."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        tracker: ITracker | None = None,
        scenarios: dict[str, list[str]] | None = None,
        pause: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_url = api_url
        self._tracker = tracker
        self._scenarios = scenarios if scenarios is not None else SCENARIOS
        self._pause = pause
        self._transport = transport
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None
        self.results: dict[str, str] = {}

    def set_tracker(self, tracker: ITracker) -> None:
        """Inject tracker for SIM trace events."""
        self._tracker = tracker

    async def start(self) -> None:
        """Start replaying scenarios in the background."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient(base_url=self._api_url, transport=self._transport)
        self._task = asyncio.create_task(self._run_scenarios())

    async def stop(self) -> None:
        """Stop replaying."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        if self._client:
            await self._client.aclose()
            self._client = None

    async def wait(self) -> None:
        """Wait until every scenario has been replayed."""
        if self._task:
            await self._task

    async def _run_scenarios(self) -> None:
        try:
            if self._tracker:
                self._tracker.track(
                    "sim_started", "sim", {"scenarios": list(self._scenarios)}
                )

            for name, utterances in self._scenarios.items():
                if not self._running:
                    break
                self.results[name] = await self._run_scenario(name, utterances)

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            if self._tracker:
                self._tracker.track("sim_completed", "sim", {"results": dict(self.results)})

    async def _run_scenario(self, name: str, utterances: list[str]) -> str:
        """Reset the session, send every utterance, return the final step."""
        await self._post("/api/control/reset")
        step = "greeting"
        for text in utterances:
            if not self._running:
                break
            data = await self._post("/api/turns", {"text": text})
            if data:
                step = data.get("step", step)
                for turn in data.get("turns", []):
                    logger.info("SIM [%s]: %s -> %s", name, text, turn["text"])
            await asyncio.sleep(self._pause)
        logger.info("SIM [%s]: finished in step %s", name, step)
        return step

    async def _post(self, path: str, payload: dict | None = None) -> dict | None:
        """POST to the API, returning the JSON body or None on failure."""
        if not self._client:
            return None

        try:
            response = await self._client.post(path, json=payload, timeout=10.0)
            if response.status_code == 200:
                return response.json()
            logger.error("SIM: %s returned %s", path, response.status_code)
        except httpx.HTTPError as e:
            logger.error("SIM: request to %s failed: %s", path, e)
        return None
