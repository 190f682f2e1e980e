"""Tests for the dashboard session - LOADING / READY / ERROR lifecycle."""

import asyncio

import httpx
import pytest

from src.dashboard.acquisition import (
    AcquisitionFailure,
    DataSupplier,
    Dataset,
    RemoteSupplier,
    StaticSupplier,
)
from src.dashboard.config import GENERIC_ERROR_MESSAGE
from src.dashboard.records import ViewMode
from src.dashboard.sample_data import SAMPLE_MEMBERS, SAMPLE_SQUADS
from src.dashboard.session import AcquisitionState, DashboardSession


# ── Helpers ──────────────────────────────────────────────────────────


class _FailingSupplier(DataSupplier):
    """Fails the way a remote supplier does when the squads fetch rejects."""

    def __init__(self, exc=None):
        self.exc = exc or AcquisitionFailure("Request to /api/squads failed")
        self.calls = 0

    async def supply(self) -> Dataset:
        self.calls += 1
        raise self.exc


class _CountingSupplier(StaticSupplier):
    def __init__(self):
        super().__init__()
        self.calls = 0

    async def supply(self) -> Dataset:
        self.calls += 1
        return await super().supply()


def _load(session):
    return asyncio.run(session.load())


# ── Tests ────────────────────────────────────────────────────────────


class TestInitialState:
    def test_starts_loading(self):
        session = DashboardSession(StaticSupplier())
        assert session.state is AcquisitionState.LOADING
        assert session.is_loading
        assert not session.is_ready
        assert session.error_message is None

    def test_aggregator_unavailable_while_loading(self):
        session = DashboardSession(StaticSupplier())
        with pytest.raises(RuntimeError, match="loading"):
            session.aggregator


class TestSuccessfulLoad:
    def test_reaches_ready(self):
        session = DashboardSession(StaticSupplier())
        assert _load(session) is AcquisitionState.READY
        assert session.is_ready
        assert session.error_message is None

    def test_aggregator_holds_supplied_data(self):
        session = DashboardSession(StaticSupplier())
        _load(session)
        agg = session.aggregator
        assert agg.view_mode is ViewMode.SQUAD
        assert agg.squads == SAMPLE_SQUADS
        assert agg.members == SAMPLE_MEMBERS

    def test_second_load_does_not_refetch(self):
        supplier = _CountingSupplier()
        session = DashboardSession(supplier)
        _load(session)
        aggregator = session.aggregator
        assert _load(session) is AcquisitionState.READY
        assert supplier.calls == 1
        assert session.aggregator is aggregator


class TestFailedLoad:
    def test_reaches_error_with_generic_message(self):
        session = DashboardSession(_FailingSupplier())
        assert _load(session) is AcquisitionState.ERROR
        assert session.error_message == GENERIC_ERROR_MESSAGE
        assert session.error_message

    def test_never_presents_data(self):
        session = DashboardSession(_FailingSupplier())
        _load(session)
        assert not session.is_ready
        with pytest.raises(RuntimeError, match="error"):
            session.aggregator

    def test_error_is_terminal(self):
        supplier = _FailingSupplier()
        session = DashboardSession(supplier)
        _load(session)
        assert _load(session) is AcquisitionState.ERROR
        assert supplier.calls == 1

    def test_unexpected_errors_propagate(self):
        session = DashboardSession(_FailingSupplier(KeyError("bug")))
        with pytest.raises(KeyError):
            _load(session)
        assert session.state is AcquisitionState.LOADING


class TestRemoteLoad:
    """Sessions backed by the HTTP supplier."""

    def test_invalid_base_url_reaches_error(self):
        session = DashboardSession(RemoteSupplier("http://[::1"))
        assert _load(session) is AcquisitionState.ERROR
        assert session.error_message == GENERIC_ERROR_MESSAGE

    def test_squads_server_error_reaches_error(self):
        def handler(request):
            if request.url.path == "/api/squads":
                return httpx.Response(500, json={"error": "boom"})
            return httpx.Response(200, json=[])

        async def go():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                session = DashboardSession(
                    RemoteSupplier("http://testserver", client=client)
                )
                return session, await session.load()

        session, state = asyncio.run(go())
        assert state is AcquisitionState.ERROR
        assert session.error_message == GENERIC_ERROR_MESSAGE
        with pytest.raises(RuntimeError):
            session.aggregator

    def test_healthy_api_reaches_ready(self):
        def handler(request):
            if request.url.path == "/api/squads":
                return httpx.Response(200, json=[
                    {"id": 1, "name": "Alpha", "performance": 85,
                     "efficiency": 90, "quality": 88},
                ])
            return httpx.Response(200, json=[
                {"id": 1, "name": "Alice", "squad": "Alpha", "performance": 88,
                 "efficiency": 92, "quality": 90},
            ])

        async def go():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                session = DashboardSession(
                    RemoteSupplier("http://testserver", client=client)
                )
                return session, await session.load()

        session, state = asyncio.run(go())
        assert state is AcquisitionState.READY
        assert [m.name for m in session.aggregator.members] == ["Alice"]
