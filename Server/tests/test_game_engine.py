"""Tests for the game state machine."""

import dataclasses

import pytest

from wordle_app.config import MAX_GUESSES
from wordle_app.exceptions import ConfigurationError
from wordle_app.models.game import GameStatus, KeyStatus, LetterVerdict, RejectionReason
from wordle_app.services import keyboard_tracker
from wordle_app.services.game_engine import GameEngine


def play(engine, word):
    for ch in word:
        engine.add_letter(ch)
    return engine.submit_guess()


class TestNewGame:
    def test_initial_state(self, engine):
        state = engine.get_state()
        assert state.word_length == 5
        assert state.max_guesses == MAX_GUESSES == 6
        assert state.guesses == ()
        assert state.current_buffer == ()
        assert state.status is GameStatus.PLAYING
        assert state.answer is None

    def test_new_game_resets_after_win(self, engine):
        play(engine, "CRANE")
        assert engine.status is GameStatus.WON

        result = engine.new_game(5)
        assert result.accepted
        state = engine.get_state()
        assert (state.word_length, state.guesses, state.current_buffer, state.status) == \
            (5, (), (), GameStatus.PLAYING)
        assert set(engine.get_keyboard_state().values()) == {KeyStatus.UNSEEN}

    def test_new_game_resets_after_loss(self, engine):
        for _ in range(MAX_GUESSES):
            play(engine, "PILOT")
        assert engine.status is GameStatus.LOST

        engine.new_game(5)
        assert engine.get_state().status is GameStatus.PLAYING
        assert engine.get_state().guesses == ()

    def test_new_game_clears_partial_buffer(self, engine):
        engine.add_letter("C")
        engine.new_game()
        assert engine.get_state().current_buffer == ()

    def test_new_game_changes_word_length(self, engine):
        engine.new_game(3)
        assert engine.word_length == 3
        assert play(engine, "CAT").state.status is GameStatus.WON

    def test_new_game_without_length_keeps_current(self, engine):
        engine.new_game(4)
        engine.new_game()
        assert engine.word_length == 4

    def test_unconfigured_length_raises(self, engine):
        with pytest.raises(ConfigurationError):
            engine.new_game(7)
        # the running game is untouched
        assert engine.word_length == 5

    def test_constructor_rejects_unconfigured_length(self, crane_dictionary):
        with pytest.raises(ConfigurationError):
            GameEngine(crane_dictionary, word_length=6)


class TestAddLetter:
    def test_appends_uppercased_letter(self, engine):
        result = engine.add_letter("c")
        assert result.accepted
        assert result.state.current_buffer == ("C",)

    @pytest.mark.parametrize("ch", ["1", "", "AB", " ", "é", "!", None, 5])
    def test_invalid_character_rejected(self, engine, ch):
        result = engine.add_letter(ch)
        assert not result.accepted
        assert result.reason is RejectionReason.INVALID_CHARACTER
        assert result.state.current_buffer == ()

    def test_full_buffer_rejected(self, engine):
        for ch in "CRANE":
            engine.add_letter(ch)
        result = engine.add_letter("S")
        assert not result.accepted
        assert result.reason is RejectionReason.BUFFER_FULL
        assert "".join(result.state.current_buffer) == "CRANE"

    def test_rejected_after_game_over(self, engine):
        play(engine, "CRANE")
        result = engine.add_letter("A")
        assert not result.accepted
        assert result.reason is RejectionReason.GAME_OVER
        assert result.state.current_buffer == ()


class TestRemoveLetter:
    def test_removes_last_letter(self, engine):
        engine.add_letter("C")
        engine.add_letter("R")
        result = engine.remove_letter()
        assert result.accepted
        assert result.state.current_buffer == ("C",)

    def test_empty_buffer_is_noop(self, engine):
        result = engine.remove_letter()
        assert not result.accepted
        assert result.reason is RejectionReason.BUFFER_EMPTY
        assert result.state == engine.get_state()

    def test_rejected_after_game_over(self, engine):
        play(engine, "CRANE")
        assert engine.remove_letter().reason is RejectionReason.GAME_OVER


class TestSubmitGuess:
    def test_winning_guess(self, engine):
        result = play(engine, "CRANE")
        assert result.accepted
        state = result.state
        assert state.status is GameStatus.WON
        assert state.won and state.game_over
        assert len(state.guesses) == 1
        assert state.guesses[0].verdicts == (LetterVerdict.CORRECT,) * 5
        assert state.answer == "CRANE"
        assert result.guess == state.guesses[0]

    def test_scored_guess_clears_buffer(self, engine):
        result = play(engine, "TRACE")
        state = result.state
        assert state.status is GameStatus.PLAYING
        assert state.current_buffer == ()
        assert state.guesses[0].results == (
            ("T", LetterVerdict.ABSENT),
            ("R", LetterVerdict.CORRECT),
            ("A", LetterVerdict.CORRECT),
            ("C", LetterVerdict.PRESENT),
            ("E", LetterVerdict.CORRECT),
        )
        assert state.answer is None

    def test_incomplete_guess_keeps_buffer(self, engine):
        engine.add_letter("C")
        engine.add_letter("R")
        result = engine.submit_guess()
        assert not result.accepted
        assert result.reason is RejectionReason.INCOMPLETE_GUESS
        assert result.state.current_buffer == ("C", "R")
        assert result.state.guesses == ()

    def test_empty_guess_rejected(self, engine):
        assert engine.submit_guess().reason is RejectionReason.INCOMPLETE_GUESS

    def test_any_letters_accepted_without_enforcement(self, engine):
        result = play(engine, "ZZZZZ")
        assert result.accepted
        assert result.state.current_round == 1

    def test_unknown_word_rejected_with_enforcement(self, strict_engine):
        result = play(strict_engine, "ZZZZZ")
        assert not result.accepted
        assert result.reason is RejectionReason.UNKNOWN_WORD
        assert "".join(result.state.current_buffer) == "ZZZZZ"
        assert result.state.guesses == ()

    def test_guess_only_word_accepted_with_enforcement(self, strict_engine):
        result = play(strict_engine, "slate")
        assert result.accepted
        assert result.state.guesses[0].word == "SLATE"

    def test_six_misses_lose(self, engine):
        for round_number in range(1, MAX_GUESSES + 1):
            result = play(engine, "PILOT")
            assert result.state.current_round == round_number

        state = engine.get_state()
        assert state.status is GameStatus.LOST
        assert state.game_over and not state.won
        assert state.answer == "CRANE"

    def test_commands_are_noops_after_loss(self, engine):
        for _ in range(MAX_GUESSES):
            play(engine, "PILOT")
        before = engine.get_state()

        assert engine.add_letter("C").reason is RejectionReason.GAME_OVER
        assert engine.submit_guess().reason is RejectionReason.GAME_OVER
        assert engine.remove_letter().reason is RejectionReason.GAME_OVER
        assert engine.get_state() == before
        assert len(engine.get_state().guesses) == MAX_GUESSES

    def test_win_on_last_guess(self, engine):
        for _ in range(MAX_GUESSES - 1):
            play(engine, "PILOT")
        assert play(engine, "CRANE").state.status is GameStatus.WON

    def test_custom_max_guesses(self, crane_dictionary):
        engine = GameEngine(crane_dictionary, max_guesses=2)
        play(engine, "PILOT")
        assert engine.status is GameStatus.PLAYING
        play(engine, "PILOT")
        assert engine.status is GameStatus.LOST


class TestSubmitWord:
    def test_scores_word_and_clears_buffer(self, engine):
        engine.add_letter("X")
        result = engine.submit_word("trace")
        assert result.accepted
        assert result.guess.word == "TRACE"
        assert result.state.current_buffer == ()
        assert result.state.current_round == 1

    def test_too_long_word_keeps_typed_letters(self, engine):
        engine.add_letter("S")
        engine.add_letter("L")
        result = engine.submit_word("CRANES")
        assert result.reason is RejectionReason.BUFFER_FULL
        assert result.state.current_buffer == ("S", "L")
        assert result.state.current_round == 0
        # The rejected word must not be left behind for a plain submit
        assert engine.submit_guess().reason is RejectionReason.INCOMPLETE_GUESS

    def test_bad_letter_keeps_typed_letters(self, engine):
        engine.add_letter("S")
        result = engine.submit_word("CR4NE")
        assert result.reason is RejectionReason.INVALID_CHARACTER
        assert result.state.current_buffer == ("S",)

    def test_short_word_keeps_typed_letters(self, engine):
        engine.add_letter("S")
        result = engine.submit_word("CRA")
        assert result.reason is RejectionReason.INCOMPLETE_GUESS
        assert result.state.current_buffer == ("S",)

    def test_unknown_word_keeps_typed_letters(self, strict_engine):
        strict_engine.add_letter("Q")
        result = strict_engine.submit_word("QQQQQ")
        assert result.reason is RejectionReason.UNKNOWN_WORD
        assert result.state.current_buffer == ("Q",)
        assert result.state.guesses == ()

    def test_non_string(self, engine):
        assert engine.submit_word(None).reason is RejectionReason.INVALID_CHARACTER

    def test_after_game_over(self, engine):
        play(engine, "CRANE")
        assert engine.submit_word("CRANE").reason is RejectionReason.GAME_OVER

    def test_result_carries_keyboard(self, engine):
        result = engine.submit_word("TRACE")
        assert result.keyboard == engine.get_keyboard_state()
        assert result.keyboard["T"] is KeyStatus.ABSENT
        rejected = engine.submit_word("TOOLONG")
        assert rejected.keyboard == result.keyboard


class TestSnapshots:
    def test_state_is_frozen(self, engine):
        state = engine.get_state()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.status = GameStatus.WON

    def test_snapshot_not_affected_by_later_commands(self, engine):
        before = engine.get_state()
        engine.add_letter("C")
        assert before.current_buffer == ()

    def test_keyboard_is_read_only(self, engine):
        keyboard = engine.get_keyboard_state()
        with pytest.raises(TypeError):
            keyboard["A"] = KeyStatus.CORRECT

    def test_keyboard_matches_recomputed_guesses(self, engine):
        for word in ("SLATE", "TRACE", "NACRE"):
            play(engine, word)
        state = engine.get_state()
        assert dict(engine.get_keyboard_state()) == keyboard_tracker.recompute(state.guesses)

    def test_keyboard_after_trace(self, engine):
        play(engine, "TRACE")
        keyboard = engine.get_keyboard_state()
        assert keyboard["T"] is KeyStatus.ABSENT
        assert keyboard["C"] is KeyStatus.PRESENT
        assert keyboard["R"] is KeyStatus.CORRECT
        assert keyboard["N"] is KeyStatus.UNSEEN

    def test_to_dict(self, engine):
        engine.add_letter("C")
        data = engine.get_state().to_dict()
        assert data == {
            "word_length": 5,
            "max_guesses": 6,
            "current_round": 0,
            "guesses": [],
            "guess_results": [],
            "current_buffer": "C",
            "status": "PLAYING",
            "game_over": False,
            "won": False,
            "answer": None,
        }
