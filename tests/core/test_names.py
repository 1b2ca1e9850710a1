"""Tests for player-name validation."""

import pytest

from memflip.core.names import PlayerNameError, validate_player_name


class TestValidatePlayerName:
    def test_accepts_letters_and_spaces(self) -> None:
        assert validate_player_name("Bob Smith") == "Bob Smith"

    def test_trims(self) -> None:
        assert validate_player_name("  Ada  ") == "Ada"

    @pytest.mark.parametrize("name", ["Bob123", "Bob-Smith", "Zoë", "a,b"])
    def test_rejects_other_characters(self, name: str) -> None:
        with pytest.raises(PlayerNameError):
            validate_player_name(name)

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_rejects_empty(self, name: str | None) -> None:
        with pytest.raises(PlayerNameError):
            validate_player_name(name)

    def test_is_a_value_error(self) -> None:
        assert issubclass(PlayerNameError, ValueError)
