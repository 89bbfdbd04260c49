"""Tests for ProfileContext, ProfileSelector and menu hotkeys."""

from unittest.mock import patch

import pytest

from awsprof.aws.exceptions import ProfileNotFoundError
from awsprof.profiles import ProfileContext, ProfileSelector
from awsprof.utils.menu import HOTKEYS, with_hotkeys
from awsprof.utils.prompts import Prompter

from conftest import FakeAws, FakePrompter


class TestProfileContext:
    def test_get_treats_empty_as_unset(self):
        assert ProfileContext(environ={"AWS_PROFILE": ""}).get() is None

    def test_custom_variable(self):
        environ = {}
        ProfileContext(environ=environ, var="MY_PROFILE").set("work:iam")
        assert environ == {"MY_PROFILE": "work:iam"}

    def test_cleared_restores_previous_value(self):
        environ = {"AWS_PROFILE": "work:admin"}
        context = ProfileContext(environ=environ)

        with context.cleared():
            assert "AWS_PROFILE" not in environ

        assert environ["AWS_PROFILE"] == "work:admin"

    def test_cleared_restores_on_error(self):
        environ = {"AWS_PROFILE": "work:admin"}
        context = ProfileContext(environ=environ)

        with pytest.raises(RuntimeError):
            with context.cleared():
                raise RuntimeError("boom")

        assert environ["AWS_PROFILE"] == "work:admin"

    def test_cleared_leaves_unset_variable_unset(self):
        environ = {}
        context = ProfileContext(environ=environ)

        with context.cleared():
            context.set("leaked")

        assert environ == {}


class TestProfileSelector:
    def test_set_active_by_name(self, context, environ):
        aws = FakeAws({"work:iam": {}})

        assert ProfileSelector(aws, context, FakePrompter()).set_active("work:iam") == "work:iam"
        assert environ["AWS_PROFILE"] == "work:iam"

    def test_set_active_unknown_name(self, context, environ):
        with pytest.raises(ProfileNotFoundError):
            ProfileSelector(FakeAws(), context, FakePrompter()).set_active("nope")
        assert environ == {}

    def test_menu_lists_sorted_profiles(self, context, environ):
        aws = FakeAws({"b:iam": {}, "a:mfa": {}, "default": {}})
        prompter = FakePrompter(choice="b:iam")

        assert ProfileSelector(aws, context, prompter).set_active() == "b:iam"
        assert prompter.menus == [["a:mfa", "b:iam", "default"]]
        assert environ["AWS_PROFILE"] == "b:iam"

    def test_cancelled_menu_changes_nothing(self, context, environ):
        aws = FakeAws({"a:iam": {}})

        assert ProfileSelector(aws, context, FakePrompter(choice=None)).set_active() is None
        assert environ == {}

    def test_no_profiles_skips_menu(self, context):
        prompter = FakePrompter(choice="x")

        assert ProfileSelector(FakeAws(), context, prompter).pick() is None
        assert prompter.menus == []


class TestHotkeys:
    def test_digits_then_letters(self):
        entries = with_hotkeys([f"p{i}" for i in range(12)])

        assert entries[0] == "[0] p0"
        assert entries[9] == "[9] p9"
        assert entries[10] == "[a] p10"
        assert entries[11] == "[b] p11"

    def test_entries_past_alphabet_have_no_hotkey(self):
        entries = with_hotkeys([f"p{i}" for i in range(len(HOTKEYS) + 2)])

        assert len(HOTKEYS) == 36
        assert entries[35] == "[z] p35"
        assert entries[36] == "    p36"
        assert not entries[37].startswith("[")

    @pytest.mark.parametrize("pressed", ["A", "a", "Z", "7"])
    def test_pressed_key_selects_the_entry_labelled_with_it(self, pressed):
        names = [f"acct{i:02d}:iam" for i in range(40)]
        shown = []

        class LowercasingMenu:
            """Resolves a key press the way TerminalMenu does: lowercased."""

            def __init__(self, entries, **kwargs):
                shown.extend(entries)

            def show(self):
                key = pressed.lower()
                for i, entry in enumerate(shown):
                    if entry.startswith(f"[{key}]"):
                        return i
                return None

        with patch("awsprof.utils.menu.TerminalMenu", LowercasingMenu):
            chosen = Prompter().choose(names, "  Select profile:")

        labelled = [i for i, entry in enumerate(shown) if entry.startswith(f"[{pressed}]")]
        if labelled:
            assert chosen == names[labelled[0]]
        else:
            # the uppercase form of a lowercase shortcut
            assert chosen == names[HOTKEYS.index(pressed.lower())]

    def test_every_shortcut_is_distinct_when_lowercased(self):
        entries = with_hotkeys([f"p{i}" for i in range(70)])
        keys = [e[1] for e in entries if e.startswith("[")]

        assert len(keys) == len({k.lower() for k in keys})
