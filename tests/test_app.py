"""Headless Textual tests for the chooser screen using async app.run_test()."""

from __future__ import annotations

from pathlib import Path

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Button

from filechooser.app import FileChooserApp
from filechooser.config import ChooserOptions
from filechooser.core.navigation import ChooserResult, Navigator
from filechooser.screens.file_chooser import FileChooserScreen
from filechooser.widgets.entry_list import EntryItem, EntryList
from filechooser.widgets.path_bar import PathBar


async def settle(pilot) -> None:
    """Let scheduled listing refreshes run to completion."""
    for _ in range(3):
        await pilot.pause()


def listed(screen: FileChooserScreen) -> list[str]:
    return [item.entry.name for item in screen.query_one(EntryList).items]


@pytest.mark.asyncio
class TestChooserComposition:
    async def test_opens_on_base_directory(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            assert isinstance(screen, FileChooserScreen)
            assert screen.navigator.state.current_path == home
            assert listed(screen) == ["docs", "a.txt"]

            crumb = screen.query_one(PathBar).breadcrumb
            assert crumb.current_label == "user"

    async def test_only_directories_hides_files(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home, only_directories=True))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            assert listed(app.screen) == ["docs"]

    async def test_custom_button_labels(self, home: Path) -> None:
        options = ChooserOptions(base_directory=home, accept_title="Aceptar", cancel_title="Cancelar")
        app = FileChooserApp(options)
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            assert app.screen.query_one("#chooser-accept").label.plain == "Aceptar"
            assert app.screen.query_one("#chooser-cancel").label.plain == "Cancelar"

    async def test_no_chooser_until_asked(self) -> None:
        app = FileChooserApp(open_on_mount=False)
        async with app.run_test(size=(120, 40)) as pilot:
            assert not isinstance(app.screen, FileChooserScreen)
            await pilot.press("ctrl+o")
            await settle(pilot)
            assert isinstance(app.screen, FileChooserScreen)


@pytest.mark.asyncio
class TestChooserNavigation:
    async def test_opening_a_directory(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            docs = screen.entries[0]
            screen.activate_entry(docs)
            await settle(pilot)

            assert screen.navigator.state.current_path == home / "docs"
            assert listed(screen) == []
            assert screen.query_one(PathBar).breadcrumb.current_label == "docs"

    async def test_backspace_goes_up(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home / "docs"))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            await pilot.press("backspace")
            await settle(pilot)
            assert app.screen.navigator.state.current_path == home
            assert listed(app.screen) == ["docs", "a.txt"]

    async def test_selecting_a_file_marks_it(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            screen.activate_entry(screen.entries[1])
            await settle(pilot)

            assert screen.navigator.state.selected_entry == home / "a.txt"
            chosen = [i.entry.name for i in screen.query(EntryItem) if i.chosen]
            assert chosen == ["a.txt"]

    async def test_options_change_while_open(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            screen.update_options(only_directories=True)
            await settle(pilot)
            assert listed(screen) == ["docs"]

            # The base directory is only honoured on first load.
            screen.update_options(base_directory=home / "docs")
            assert screen.navigator.state.current_path == home

    async def test_toggle_hidden(self, home: Path) -> None:
        (home / ".secret").write_text("")
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            assert ".secret" in listed(app.screen)
            app.screen.action_toggle_hidden()
            await settle(pilot)
            assert ".secret" not in listed(app.screen)


@pytest.mark.asyncio
class TestChooserResult:
    async def test_accept_selected_file(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            screen.navigator.select(str(home / "a.txt"))
            screen.action_accept()
            await settle(pilot)

            assert app.last_result == ChooserResult(home / "a.txt", True)
            assert not isinstance(app.screen, FileChooserScreen)

    async def test_accept_current_directory(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home, only_directories=True))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            app.screen.action_accept()
            await settle(pilot)
            assert app.last_result == (home, True)

    async def test_accept_without_selection_stays_open(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            assert screen.query_one("#chooser-accept").disabled is True
            screen.action_accept()
            await settle(pilot)
            assert app.screen is screen
            assert app.last_result is None

    async def test_escape_cancels(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            await pilot.press("escape")
            await settle(pilot)
            assert app.last_result == ChooserResult(None, False)

    async def test_result_fires_once(self, home: Path) -> None:
        app = FileChooserApp(open_on_mount=False)
        async with app.run_test(size=(120, 40)) as pilot:
            results: list[ChooserResult] = []
            screen = FileChooserScreen(ChooserOptions(base_directory=home, only_directories=True))
            app.push_screen(screen, callback=lambda r: results.append(r))
            await settle(pilot)

            screen.action_accept()
            screen.action_cancel()
            await settle(pilot)

            assert results == [ChooserResult(home, True)]

    async def test_shared_navigator_is_released(self, home: Path) -> None:
        app = FileChooserApp(open_on_mount=False)
        async with app.run_test(size=(120, 40)) as pilot:
            navigator = Navigator()
            screen = FileChooserScreen(ChooserOptions(base_directory=home), navigator=navigator)
            app.push_screen(screen)
            await settle(pilot)
            assert len(navigator._listeners) == 1

            screen.action_cancel()
            await settle(pilot)
            assert navigator._listeners == []

    async def test_close_icon_cancels(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            app.screen.query_one("#chooser-close", Button).press()
            await settle(pilot)
            assert app.last_result == ChooserResult(None, False)
            assert not isinstance(app.screen, FileChooserScreen)


@pytest.mark.asyncio
class TestChooserRefresh:
    async def test_superseded_refresh_is_dropped(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            old_generation = screen.navigator.generation
            screen.navigator.navigate_to(home / "docs")

            await screen._refresh_view(old_generation)
            assert [e.name for e in screen.entries] == ["docs", "a.txt"]

            await settle(pilot)
            assert screen.entries == []
            assert screen.query_one(PathBar).breadcrumb.current_label == "docs"

    async def test_last_navigation_wins(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            screen.navigator.navigate_to(home / "docs")
            screen.navigator.navigate_to(home)
            await settle(pilot)
            assert listed(screen) == ["docs", "a.txt"]
            assert screen.query_one(PathBar).breadcrumb.current_label == "user"

    async def test_visible_option(self, home: Path) -> None:
        app = FileChooserApp(ChooserOptions(base_directory=home, visible=False))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            screen = app.screen
            assert screen.query_one("#chooser-container").display is False

            screen.update_options(visible=True)
            await settle(pilot)
            assert screen.query_one("#chooser-container").display is True


class PathBarHost(App):
    """Mounts a lone PathBar and records what it posts."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.start_path = path
        self.posted: list[str] = []

    def compose(self) -> ComposeResult:
        yield PathBar(self.start_path)

    def on_path_bar_parent_clicked(self, event: PathBar.ParentClicked) -> None:
        self.posted.append("parent")

    def on_path_bar_home_clicked(self, event: PathBar.HomeClicked) -> None:
        self.posted.append("home")


@pytest.mark.asyncio
class TestPathBarWidget:
    async def test_root_does_not_go_up(self, tmp_path: Path) -> None:
        app = PathBarHost(Path(tmp_path.anchor))
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            bar = app.query_one(PathBar)
            assert bar.breadcrumb.can_go_up is False
            assert bar.query_one("#path-current").display is False

            bar.query_one("#path-up", Button).press()
            bar.query_one("#path-parent", Button).press()
            await settle(pilot)
            assert app.posted == []

            bar.query_one("#path-home", Button).press()
            await settle(pilot)
            assert app.posted == ["home"]

    async def test_directory_goes_up(self, home: Path) -> None:
        app = PathBarHost(home)
        async with app.run_test(size=(120, 40)) as pilot:
            await settle(pilot)
            bar = app.query_one(PathBar)
            bar.query_one("#path-up", Button).press()
            bar.query_one("#path-parent", Button).press()
            await settle(pilot)
            assert app.posted == ["parent", "parent"]
