"""Tests for the scenario simulator."""

import json

import httpx
import pytest

from sim import SCENARIOS, Sim


def make_transport(requests: list[tuple[str, dict | None]]) -> httpx.MockTransport:
    """Fake API that records requests and answers like the real routes."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        requests.append((request.url.path, body))
        if request.url.path == "/api/control/reset":
            return httpx.Response(200, json={"status": "ok"})
        if body and body.get("text") == "boom":
            return httpx.Response(500, json={"detail": "boom"})
        return httpx.Response(
            200,
            json={
                "step": f"after_{body['text']}",
                "turns": [{"speaker": "bot", "text": "ok", "timestamp": "2024-01-01T00:00:00"}],
            },
        )

    return httpx.MockTransport(handler)


class TestSim:
    """Tests for Sim."""

    @pytest.mark.asyncio
    async def test_replays_scenarios_in_order(self, tracker):
        requests = []
        sim = Sim(
            api_url="http://testserver",
            tracker=tracker,
            scenarios={"first": ["yes", "AB123456789CD"], "second": ["no"]},
            pause=0,
            transport=make_transport(requests),
        )

        await sim.start()
        await sim.wait()

        assert requests == [
            ("/api/control/reset", None),
            ("/api/turns", {"text": "yes"}),
            ("/api/turns", {"text": "AB123456789CD"}),
            ("/api/control/reset", None),
            ("/api/turns", {"text": "no"}),
        ]
        assert sim.results == {"first": "after_AB123456789CD", "second": "after_no"}
        await sim.stop()

    @pytest.mark.asyncio
    async def test_tracks_start_and_completion(self, tracker):
        sim = Sim(
            tracker=tracker,
            scenarios={"only": ["yes"]},
            pause=0,
            transport=make_transport([]),
        )

        await sim.start()
        await sim.wait()
        await sim.stop()

        event_types = [e.event_type for e in tracker.get_events(actor="sim")]
        assert event_types == ["sim_started", "sim_completed"]

    @pytest.mark.asyncio
    async def test_server_error_keeps_previous_step(self):
        sim = Sim(
            scenarios={"broken": ["yes", "boom"]},
            pause=0,
            transport=make_transport([]),
        )

        await sim.start()
        await sim.wait()
        await sim.stop()

        assert sim.results == {"broken": "after_yes"}

    def test_default_scenarios_cover_main_paths(self):
        assert SCENARIOS["delivered"][:2] == ["yes", "AB123456789CD"]
        assert SCENARIOS["unknown_order"][:2] == ["no", "not-an-email-or-number"]
