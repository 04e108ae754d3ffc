"""
App controller tests.

Verifies the view stack, command execution and status message handling:
- Popping the last view signals exit
- Global keys win over view keys
- Opening a view refreshes it at once
- Daemon errors become a status message, never an exception
"""

import pytest
from rich.console import Console

from dockyard_core.docker.exceptions import DockerAPIError, DockerError
from dockyard_core.docker.types import ContainerDetails
from dockyard_core.tui.commands import ErrorMsg, ExitView, NoOp, Refresh, SwitchToView, ViewType
from dockyard_core.tui.controller import App
from dockyard_core.views import (
    AppLogsView,
    ContainerDetailsView,
    ContainerListView,
    DaemonInfoView,
    HelpView,
    ImagesListView,
)


@pytest.fixture
def app(fake_docker, container_factory):
    fake_docker.containers = [container_factory("aaa"), container_factory("bbb")]
    return App(fake_docker)


class TestViewStack:
    """Tests for pushing and popping views."""

    def test_starts_with_container_list(self, app, fake_docker):
        assert len(app.views) == 1
        assert isinstance(app.current_view, ContainerListView)
        assert fake_docker.calls_to("list_containers") == [("list_containers", True)]

    def test_quit_pops_then_exits(self, app):
        app.handle_input("?")
        assert len(app.views) == 2

        assert app.handle_input("q") is True
        assert len(app.views) == 1
        assert app.handle_input("q") is False
        assert app.views == []

    @pytest.mark.parametrize(
        "key,view_class",
        [
            ("?", HelpView),
            ("i", ImagesListView),
            ("v", DaemonInfoView),
            ("L", AppLogsView),
        ],
    )
    def test_global_keys_open_views(self, app, key, view_class):
        assert app.handle_input(key) is True
        assert isinstance(app.current_view, view_class)

    def test_push_refreshes_new_view(self, app, fake_docker):
        app.handle_input("i")

        assert fake_docker.calls_to("list_images") == [("list_images", True)]

    def test_view_key_opens_details(self, app, fake_docker):
        fake_docker.details["bbb"] = ContainerDetails.model_validate({"Id": "bbb", "Name": "/bbb-name"})
        app.handle_input("j")
        app.handle_input("enter")

        view = app.current_view
        assert isinstance(view, ContainerDetailsView)
        assert view.container_id == "bbb"
        assert view.details.name == "/bbb-name"
        assert app.status_message is None
        assert fake_docker.calls_to("inspect_container") == [("inspect_container", "bbb")]

    def test_details_of_vanished_container_sets_message(self, app):
        app.handle_input("enter")

        assert isinstance(app.current_view, ContainerDetailsView)
        assert app.current_view.details is None
        assert "No such container: aaa" in app.status_message

    def test_views_below_top_keep_state(self, app):
        app.handle_input("j")
        app.handle_input("i")
        app.handle_input("q")

        assert app.current_view.selected == 1

    def test_initial_view(self, fake_docker):
        app = App(fake_docker, initial_view=ViewType.help())

        assert isinstance(app.current_view, HelpView)


class TestInput:
    """Tests for global and view key dispatch."""

    def test_global_key_checked_before_view(self, app):
        class GreedyView(HelpView):
            def handle_input(self, key, docker):
                return ErrorMsg(f"view saw {key}")

        app.views.append(GreedyView())

        assert app.handle_input("q") is True
        assert isinstance(app.current_view, ContainerListView)
        assert app.status_message is None

    def test_view_gets_non_global_keys(self, app):
        app.handle_input("a")

        assert app.current_view.only_running is True

    def test_refresh_key(self, app, fake_docker):
        app.handle_input("r")

        assert len(fake_docker.calls_to("list_containers")) == 2

    def test_unhandled_key_is_noop(self, app, fake_docker):
        calls = list(fake_docker.calls)

        assert app.handle_input("z") is True
        assert fake_docker.calls == calls
        assert len(app.views) == 1

    def test_noop_command(self, app):
        assert app.execute(NoOp()) is True
        assert len(app.views) == 1


class TestErrors:
    """Daemon failures surface as the status message."""

    def test_error_msg_sets_message(self, app):
        app.execute(ErrorMsg("something broke"))

        assert app.status_message == "something broke"

    def test_failed_push_keeps_view_and_sets_message(self, app, fake_docker):
        fake_docker.fail["list_images"] = DockerError("connection refused")

        assert app.handle_input("i") is True

        assert len(app.views) == 2
        assert isinstance(app.current_view, ImagesListView)
        assert "connection refused" in app.status_message

    def test_failed_action_keeps_stack(self, app, fake_docker):
        fake_docker.fail["container_lifecycle_op"] = DockerAPIError(409, "conflict")

        app.handle_input("s")

        assert len(app.views) == 1
        assert "Failed to stop container aaa" in app.status_message

    def test_successful_refresh_clears_message(self, app):
        app.execute(ErrorMsg("old error"))

        app.execute(Refresh())

        assert app.status_message is None

    def test_failed_refresh_keeps_message(self, app, fake_docker):
        fake_docker.fail["list_containers"] = DockerError("timed out")

        app.execute(Refresh())

        assert "timed out" in app.status_message


class TestTick:
    """Tests for periodic refresh."""

    def test_tick_refreshes_only_top_view(self, app, fake_docker):
        app.handle_input("i")
        list_calls = len(fake_docker.calls_to("list_containers"))

        app.refresh()

        assert len(fake_docker.calls_to("list_containers")) == list_calls
        assert len(fake_docker.calls_to("list_images")) == 2

    def test_tick_updates_daemon_info(self, app, fake_docker):
        app.refresh()

        assert app.info is fake_docker.daemon_info

    def test_failed_tick_keeps_cached_data(self, app, fake_docker):
        fake_docker.fail["list_containers"] = DockerError("daemon gone")

        app.refresh()

        assert [c.id for c in app.current_view.containers] == ["aaa", "bbb"]
        assert "daemon gone" in app.status_message

    def test_failed_info_sets_message(self, app, fake_docker):
        fake_docker.fail["info"] = DockerError("daemon gone")

        app.refresh()

        assert "daemon info" in app.status_message


class TestDraw:
    """Drawing never talks to the daemon."""

    def test_draw_renders_all_regions(self, app, fake_docker):
        calls = list(fake_docker.calls)
        app.resize(100, 30)

        layout = app.draw()

        console = Console(width=100, height=30, record=True)
        console.print(layout)
        output = console.export_text()
        assert "Dockyard" in output
        assert "aaa" in output
        assert "?: help" in output
        assert fake_docker.calls == calls

    def test_draw_shows_status_message(self, app):
        app.execute(ErrorMsg("Failed to do the thing"))

        console = Console(width=100, height=30, record=True)
        console.print(app.draw())

        assert "Failed to do the thing" in console.export_text()

    def test_resize_reports_change(self, app):
        assert app.resize(100, 40) is True
        assert app.resize(100, 40) is False

    def test_exit_view_command(self, app):
        assert app.execute(ExitView()) is False

    def test_switch_command(self, app):
        app.execute(SwitchToView(ViewType.daemon_info()))

        assert isinstance(app.current_view, DaemonInfoView)
