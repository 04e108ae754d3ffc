"""
Tests for the secondary views: details, logs, images, daemon info, help and
application logs.

Rendering is checked through a recording rich Console so assertions run on
the text a user would see.
"""

import logging
from datetime import datetime

import pytest
from rich.console import Console

from dockyard_core.docker.exceptions import DockerError
from dockyard_core.docker.tty import StdErr, StdOut
from dockyard_core.docker.types import ContainerDetails, ImageSummary
from dockyard_core.tui.buffer import LogBuffer, LogEntry
from dockyard_core.tui.commands import NoOp, ViewKind, ViewType
from dockyard_core.tui.keyboard import Key
from dockyard_core.tui.layout import Rect
from dockyard_core.views import (
    AppLogsView,
    ContainerDetailsView,
    ContainerLogsView,
    DaemonInfoView,
    HelpView,
    ImagesListView,
    create_view,
)
from dockyard_core.views.help import HELP_LINES


def render_text(view, width: int = 100, height: int = 30) -> str:
    console = Console(width=width, height=height, record=True)
    console.print(view.render(Rect(width, height)))
    return console.export_text()


class TestViewType:
    def test_details_requires_container(self):
        with pytest.raises(ValueError):
            ViewType(ViewKind.CONTAINER_DETAILS)

    def test_list_rejects_container(self):
        with pytest.raises(ValueError):
            ViewType(ViewKind.CONTAINER_LIST, "abc")

    def test_equality(self):
        assert ViewType.container_logs("abc") == ViewType.container_logs("abc")
        assert ViewType.container_logs("abc") != ViewType.container_details("abc")

    @pytest.mark.parametrize(
        "view_type,view_class",
        [
            (ViewType.help(), HelpView),
            (ViewType.container_details("abc"), ContainerDetailsView),
            (ViewType.container_logs("abc"), ContainerLogsView),
            (ViewType.images_list(), ImagesListView),
            (ViewType.daemon_info(), DaemonInfoView),
            (ViewType.app_logs(), AppLogsView),
        ],
    )
    def test_create_view(self, view_type, view_class):
        assert isinstance(create_view(view_type, log_buffer=LogBuffer()), view_class)

    def test_create_logs_view_uses_tail(self):
        view = create_view(ViewType.container_logs("abc"), log_buffer=LogBuffer(), log_tail=25)

        assert view.tail == 25


class TestContainerDetailsView:
    def test_refresh_and_render(self, fake_docker):
        fake_docker.details["abc123"] = ContainerDetails.model_validate(
            {"Id": "abc123", "Name": "/web", "Config": {"Image": "nginx"}}
        )
        view = ContainerDetailsView("abc123")

        view.refresh(fake_docker)
        text = render_text(view)

        assert '"Name": "/web"' in text
        assert '"Image": "nginx"' in text

    def test_render_before_data(self):
        assert "Could not retrieve container details." in render_text(ContainerDetailsView("abc"))

    def test_scroll_clamped_at_top(self, fake_docker):
        view = ContainerDetailsView("abc")

        assert view.handle_input("k", fake_docker) == NoOp()
        assert view.scroll == 0

    def test_scroll_clamped_at_last_line(self, fake_docker):
        fake_docker.details["abc"] = ContainerDetails.model_validate(
            {"Id": "abc", "Config": {"Env": [f"VAR{i}=1" for i in range(30)]}}
        )
        view = ContainerDetailsView("abc")
        view.refresh(fake_docker)
        last = len(view.lines) - 1

        view.handle_input(Key.PAGE_DOWN, fake_docker)
        assert view.scroll == 10
        for _ in range(10):
            view.handle_input(Key.PAGE_DOWN, fake_docker)
        assert view.scroll == last
        view.handle_input("j", fake_docker)
        assert view.scroll == last

        view.handle_input("k", fake_docker)
        assert view.scroll == last - 1

    def test_scroll_reclamped_when_content_shrinks(self, fake_docker):
        fake_docker.details["abc"] = ContainerDetails.model_validate(
            {"Id": "abc", "Labels": {f"l{i}": "x" for i in range(40)}}
        )
        view = ContainerDetailsView("abc")
        view.refresh(fake_docker)
        view.handle_input(Key.PAGE_DOWN, fake_docker)
        view.handle_input(Key.PAGE_DOWN, fake_docker)
        fake_docker.details["abc"] = ContainerDetails.model_validate({"Id": "abc"})

        view.refresh(fake_docker)

        assert view.scroll == len(view.lines) - 1


class TestContainerLogsView:
    def test_refresh_demuxes_stream(self, fake_docker, log_frame):
        fake_docker.log_bytes = log_frame(1, b"listening on :80\n") + log_frame(2, b"warning: x\n")
        view = ContainerLogsView("abc", tail=50)

        view.refresh(fake_docker)

        assert view.lines == [StdOut("listening on :80"), StdErr("warning: x")]
        assert fake_docker.calls_to("fetch_log_stream") == [("fetch_log_stream", "abc", 50)]
        text = render_text(view)
        assert "listening on :80" in text
        assert "warning: x" in text

    def test_failed_refresh_keeps_lines(self, fake_docker, log_frame):
        fake_docker.log_bytes = log_frame(1, b"old")
        view = ContainerLogsView("abc")
        view.refresh(fake_docker)
        fake_docker.fail["fetch_log_stream"] = DockerError("gone")

        with pytest.raises(DockerError):
            view.refresh(fake_docker)

        assert view.lines == [StdOut("old")]

    def test_render_before_data(self):
        assert "Could not retrieve container logs." in render_text(ContainerLogsView("abc"))


class TestImagesListView:
    def test_refresh_lists_all_images(self, fake_docker):
        fake_docker.images = [
            ImageSummary.model_validate({"Id": "sha256:1111aaaa2222", "RepoTags": ["nginx:latest"], "Size": 1500000}),
            ImageSummary.model_validate({"Id": "sha256:3333bbbb4444", "RepoTags": None}),
        ]
        view = ImagesListView()

        view.refresh(fake_docker)

        assert fake_docker.calls_to("list_images") == [("list_images", True)]
        text = render_text(view)
        assert "nginx:latest" in text
        assert "<none>" in text
        assert "1.5 MB" in text

    def test_navigation_clamped(self, fake_docker):
        fake_docker.images = [ImageSummary.model_validate({"Id": f"sha256:{i}"}) for i in range(3)]
        view = ImagesListView()
        view.refresh(fake_docker)

        view.handle_input(Key.PAGE_DOWN, fake_docker)
        assert view.selected == 2
        assert view.handle_input("d", fake_docker) is None


class TestDaemonInfoView:
    def test_render_info(self, fake_docker):
        view = DaemonInfoView()
        view.refresh(fake_docker)

        text = render_text(view)

        assert "docker-host" in text
        assert "Engine details" in text

    def test_render_before_data(self):
        text = render_text(DaemonInfoView())

        assert "Could not retrieve information from the Docker daemon." in text

    def test_ignores_keys(self, fake_docker):
        assert DaemonInfoView().handle_input("j", fake_docker) is None


class TestHelpView:
    def test_lists_keys(self):
        text = render_text(HelpView())

        assert "KEYS:" in text
        assert "delete container" in text

    def test_scroll_stops_at_last_line(self, fake_docker):
        view = HelpView()

        for _ in range(10):
            view.handle_input(Key.PAGE_DOWN, fake_docker)

        assert view.scroll == len(HELP_LINES) - 1
        assert HELP_LINES[-1] in render_text(view)


class TestAppLogsView:
    @pytest.fixture
    def buffer(self):
        buffer = LogBuffer()
        for level, message in [
            (logging.DEBUG, "debug detail"),
            (logging.INFO, "connected"),
            (logging.WARNING, "refresh failed"),
        ]:
            buffer.append(
                LogEntry(created=datetime(2024, 1, 1, 12, 0), level=level, logger="dockyard_core", message=message)
            )
        return buffer

    def test_refresh_snapshots_buffer(self, buffer, fake_docker):
        view = AppLogsView(buffer)

        view.refresh(fake_docker)

        assert [e.message for e in view.entries] == ["connected", "refresh failed"]
        assert "refresh failed" in render_text(view)

    def test_level_keys(self, buffer, fake_docker):
        view = AppLogsView(buffer)

        view.handle_input("+", fake_docker)
        assert view.min_level == logging.WARNING
        assert [e.message for e in view.entries] == ["refresh failed"]

        view.handle_input("-", fake_docker)
        view.handle_input("-", fake_docker)
        view.handle_input("-", fake_docker)
        assert view.min_level == logging.DEBUG
        assert len(view.entries) == 3

    def test_scroll_up_moves_back_in_history(self, buffer, fake_docker):
        view = AppLogsView(buffer)
        view.refresh(fake_docker)

        view.handle_input(Key.UP, fake_docker)
        assert view.scroll == 1
        view.handle_input(Key.UP, fake_docker)
        assert view.scroll == 1
        view.handle_input(Key.DOWN, fake_docker)
        view.handle_input(Key.DOWN, fake_docker)
        assert view.scroll == 0
