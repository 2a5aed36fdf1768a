"""Internationalisation strings for chessterm.

Usage::

    from chessterm.ui.i18n import t, set_language

    set_language("Russian")
    print(t().status_illegal_move)          # "Недопустимый ход"
    print(t().title_checkmate.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass

from chessterm.core.rules import DrawReason
from chessterm.core.types import Side


@dataclass(frozen=True)
class Strings:
    # ── Status line ──────────────────────────────────────────────────────
    status_new_game: str  # "{color} to move"
    status_piece_selected: str  # "Piece selected at {square}"
    status_no_piece: str
    status_selection_cleared: str
    status_deselected: str
    status_illegal_move: str
    status_not_your_turn: str
    status_moved: str  # "Moved: {move}"
    status_engine_moved: str  # "{name} moved: {move}"
    status_check: str  # "{move}: {color} is in check"
    status_checkmate: str  # "{move}: checkmate, {color} wins"
    status_stalemate: str  # "{move}: stalemate, draw"
    status_draw: str  # "{move}: draw by {reason}"
    status_game_over: str

    # ── Title line ───────────────────────────────────────────────────────
    title_turn: str  # "{color}'s turn"
    title_check: str  # "{color} is in check!"
    title_checkmate: str  # "Checkmate! {color} wins!"
    title_stalemate: str
    title_draw: str  # "Draw by {reason}"
    title_status: str

    # ── Misc ─────────────────────────────────────────────────────────────
    color_white: str
    color_black: str
    draw_insufficient_material: str
    draw_seventy_five_moves: str
    draw_fivefold_repetition: str
    help_keys: str

    def color(self, side: Side) -> str:
        return self.color_white if side == Side.WHITE else self.color_black

    def draw_reason(self, reason: DrawReason) -> str:
        if reason == DrawReason.INSUFFICIENT_MATERIAL:
            return self.draw_insufficient_material
        if reason == DrawReason.SEVENTY_FIVE_MOVES:
            return self.draw_seventy_five_moves
        return self.draw_fivefold_repetition


_EN = Strings(
    status_new_game="New game. {color} to move.",
    status_piece_selected="Piece selected at {square}",
    status_no_piece="No piece to move here",
    status_selection_cleared="Selection cleared",
    status_deselected="Piece deselected",
    status_illegal_move="Illegal move!",
    status_not_your_turn="Not your turn",
    status_moved="Moved: {move}",
    status_engine_moved="{name} moved: {move}",
    status_check="{move}: {color} is in check",
    status_checkmate="{move}: checkmate, {color} wins",
    status_stalemate="{move}: stalemate, draw",
    status_draw="{move}: draw by {reason}",
    status_game_over="Game over. Press q to quit.",
    title_turn="{color}'s turn",
    title_check="{color} is in check!",
    title_checkmate="Checkmate! {color} wins!",
    title_stalemate="Stalemate!",
    title_draw="Draw by {reason}",
    title_status="Status",
    color_white="White",
    color_black="Black",
    draw_insufficient_material="insufficient material",
    draw_seventy_five_moves="the seventy-five move rule",
    draw_fivefold_repetition="fivefold repetition",
    help_keys="arrows/hjkl move  enter select  esc cancel  q quit",
)

_RU = Strings(
    status_new_game="Новая партия. Ход {color}.",
    status_piece_selected="Выбрана фигура на {square}",
    status_no_piece="Здесь нет вашей фигуры",
    status_selection_cleared="Выбор сброшен",
    status_deselected="Выбор отменён",
    status_illegal_move="Недопустимый ход!",
    status_not_your_turn="Сейчас не ваш ход",
    status_moved="Ход: {move}",
    status_engine_moved="{name} сходил: {move}",
    status_check="{move}: шах, {color}",
    status_checkmate="{move}: мат, победа {color}",
    status_stalemate="{move}: пат, ничья",
    status_draw="{move}: ничья ({reason})",
    status_game_over="Партия окончена. Нажмите q для выхода.",
    title_turn="Ход: {color}",
    title_check="Шах: {color}!",
    title_checkmate="Мат! Победа: {color}!",
    title_stalemate="Пат!",
    title_draw="Ничья ({reason})",
    title_status="Статус",
    color_white="белые",
    color_black="чёрные",
    draw_insufficient_material="недостаточно материала",
    draw_seventy_five_moves="правило 75 ходов",
    draw_fivefold_repetition="пятикратное повторение",
    help_keys="стрелки/hjkl — курсор  enter — выбор  esc — отмена  q — выход",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
