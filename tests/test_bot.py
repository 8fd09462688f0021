"""Tests for the Discord wiring, with interactions replaced by fakes."""

import asyncio

import discord
import pytest

import bot as bot_module
from keyboards import Button
from messages import WELCOME_TEXT


class FakeResponse:
    def __init__(self, events):
        self.events = events

    async def defer(self):
        self.events.append("defer")

    async def send_message(self, content, view=None):
        self.events.append(("send", content, view))


class FakeInteraction:
    def __init__(self, custom_id=None, interaction_type=discord.InteractionType.component):
        self.type = interaction_type
        self.data = {"custom_id": custom_id} if custom_id is not None else {}
        self.events = []
        self.response = FakeResponse(self.events)

    async def edit_original_response(self, content=None, view=None):
        self.events.append(("edit", content, view))


def buttons_of(view):
    return [(item.label, item.custom_id, item.row) for item in view.children]


def test_build_view_maps_rows_and_tokens():
    layout = [
        [Button("⬅ Yesterday", "games:2024-04-30"), Button("Today", "scores")],
        [Button("⬅ Back", "back:start")],
    ]

    async def build():
        return bot_module.build_view(layout)

    view = asyncio.run(build())
    assert buttons_of(view) == [
        ("⬅ Yesterday", "games:2024-04-30", 0),
        ("Today", "scores", 0),
        ("⬅ Back", "back:start", 1),
    ]
    assert view.children[0].style == discord.ButtonStyle.primary
    assert view.children[2].style == discord.ButtonStyle.secondary


def test_button_press_is_acknowledged_then_edited():
    interaction = FakeInteraction("back:start")
    asyncio.run(bot_module.on_interaction(interaction))

    assert interaction.events[0] == "defer"
    kind, content, view = interaction.events[1]
    assert kind == "edit"
    assert content == WELCOME_TEXT
    assert "scores" in [item.custom_id for item in view.children]
    assert len(interaction.events) == 2


def test_unknown_token_is_acknowledged_but_not_edited():
    interaction = FakeInteraction("bogus")
    asyncio.run(bot_module.on_interaction(interaction))
    assert interaction.events == ["defer"]


@pytest.mark.parametrize("interaction", [
    FakeInteraction("scores", interaction_type=discord.InteractionType.application_command),
    FakeInteraction(None),
    FakeInteraction(""),
])
def test_non_button_interactions_are_ignored(interaction):
    asyncio.run(bot_module.on_interaction(interaction))
    assert interaction.events == []


def test_start_command_sends_menu():
    interaction = FakeInteraction()
    asyncio.run(bot_module.start.callback(interaction))

    kind, content, view = interaction.events[0]
    assert kind == "send"
    assert content == WELCOME_TEXT
    assert [item.custom_id for item in view.children] == ["scores", "standings", "teams", "rosters"]


def test_missing_token_exits_nonzero(monkeypatch):
    monkeypatch.delenv("DISCORD_BOT_TOKEN", raising=False)
    monkeypatch.setattr(discord.utils, "setup_logging", lambda **kwargs: None)

    with pytest.raises(SystemExit) as excinfo:
        bot_module.main()
    assert excinfo.value.code == 1
