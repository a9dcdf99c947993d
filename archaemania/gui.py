from __future__ import annotations

import random
import sys

try:
    from PySide6.QtWidgets import (
        QApplication,
        QHBoxLayout,
        QInputDialog,
        QLabel,
        QMainWindow,
        QMessageBox,
        QPlainTextEdit,
        QPushButton,
        QVBoxLayout,
        QWidget,
    )
except ModuleNotFoundError as exc:  # pragma: no cover
    raise SystemExit(
        "PySide6 is not installed. Install it with: python3 -m pip install PySide6"
    ) from exc

from archaemania.constants import (
    ACTION_ATTACK,
    ACTION_BUY,
    ACTION_EXIT,
    ACTION_TRAIN,
    ACTION_USE,
    ACTION_WORK,
    ATTRIBUTE_NAMES,
)
from archaemania.models import GameState, Player, TurnAction
from archaemania.modules.item_catalog import consumable_types, weapon_types
from archaemania.modules.player_profile import max_health, new_game
from archaemania.modules.shop import can_afford
from archaemania.modules.turn_engine import begin_turn, take_turn
from archaemania.utils import label_for


class ArchaemaniaWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Archaemania")
        self.resize(960, 680)

        self.rng = random.Random()
        self.state: GameState = new_game()

        page = QWidget()
        self.setCentralWidget(page)
        root = QVBoxLayout(page)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(14)

        self.header = QLabel("")
        self.header.setStyleSheet("font-size: 24px; font-weight: 700;")
        self.status = QLabel("")
        self.status.setStyleSheet("font-size: 13px; color: #4f5d75;")
        root.addWidget(self.header)
        root.addWidget(self.status)

        panel_row = QHBoxLayout()
        panel_row.setSpacing(12)
        self.player_views: list[QPlainTextEdit] = []
        for _ in range(2):
            view = QPlainTextEdit()
            view.setReadOnly(True)
            panel_row.addWidget(view, 1)
            self.player_views.append(view)
        root.addLayout(panel_row, 1)

        button_row = QHBoxLayout()
        button_row.setSpacing(8)
        self.action_buttons: list[QPushButton] = []
        for label, handler in (
            ("Attack", self._attack),
            ("Buy Weapon", self._buy_weapon),
            ("Buy Consumable", self._buy_consumable),
            ("Work", self._work),
            ("Use", self._use),
            ("Train", self._train),
            ("Exit", self._exit),
        ):
            button = QPushButton(label)
            button.setMinimumHeight(40)
            button.clicked.connect(handler)
            button_row.addWidget(button)
            self.action_buttons.append(button)

        new_game_button = QPushButton("New Game")
        new_game_button.setMinimumHeight(40)
        new_game_button.clicked.connect(self._new_game)
        button_row.addWidget(new_game_button)
        root.addLayout(button_row)

        self.event_log = QPlainTextEdit()
        self.event_log.setReadOnly(True)
        self.event_log.setMaximumBlockCount(500)
        self.event_log.setPlaceholderText("Event log")
        root.addWidget(self.event_log, 1)

        self._start_turn()

    def _append_log(self, message: str) -> None:
        self.event_log.appendPlainText(message)

    def _new_game(self) -> None:
        self.state = new_game()
        self.event_log.clear()
        self._append_log("New game started.")
        self._start_turn()

    def _start_turn(self) -> None:
        for message in begin_turn(self.state):
            self._append_log(message)
        self._refresh_view()

    def _choose(self, title: str, prompt: str, options: list[str]) -> str | None:
        choice, ok = QInputDialog.getItem(self, title, prompt, options, 0, False)
        if not ok or not choice:
            return None
        return str(choice)

    def _play(self, action: TurnAction) -> None:
        if self.state.is_over:
            return
        outcome = take_turn(self.state, action, rng=self.rng)
        for message in outcome.messages:
            self._append_log(message)

        if outcome.game_over:
            self._refresh_view()
            QMessageBox.information(self, "Game Over", f"{self.state.winner} has won the game!")
            return
        self._start_turn()

    def _attack(self) -> None:
        self._play(TurnAction(ACTION_ATTACK))

    def _work(self) -> None:
        self._play(TurnAction(ACTION_WORK))

    def _exit(self) -> None:
        decision = QMessageBox.question(
            self,
            "Exit",
            f"{self.state.active_player.name} forfeits the game?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if decision == QMessageBox.StandardButton.Yes:
            self._play(TurnAction(ACTION_EXIT))

    def _buy_weapon(self) -> None:
        item = self._choose("Buy Weapon", "Choose weapon:", weapon_types())
        if item is not None:
            self._play(TurnAction(ACTION_BUY, item))

    def _buy_consumable(self) -> None:
        item = self._choose("Buy Consumable", "Choose consumable:", consumable_types())
        if item is not None:
            self._play(TurnAction(ACTION_BUY, item))

    def _use(self) -> None:
        item = self._choose("Use", "Choose consumable:", consumable_types())
        if item is not None:
            self._play(TurnAction(ACTION_USE, item))

    def _train(self) -> None:
        labels = [label_for(name) for name in ATTRIBUTE_NAMES]
        choice = self._choose("Train", "Choose stat:", labels)
        if choice is not None:
            self._play(TurnAction(ACTION_TRAIN, ATTRIBUTE_NAMES[labels.index(choice)]))

    def _player_lines(self, player: Player) -> list[str]:
        lines = [
            player.name,
            f"Health: {player.health}/{max_health()}",
            f"Gold: {player.gold}",
            "",
        ]
        for key, value in player.attributes.to_dict().items():
            lines.append(f"{label_for(key)}: {value}")
        lines.extend([
            "",
            f"Weapon: {player.weapon.describe()}",
            f"Consumables: {', '.join(player.inventory_labels()) or 'none'}",
        ])
        for effect in player.active_effects:
            lines.append(f"  active: {effect.consumable_type} until turn {effect.expires_at()}")
        affordable = [item for item in weapon_types() if can_afford(player, item)]
        lines.append(f"Can buy: {', '.join(affordable) or 'no weapons'}")
        return lines

    def _refresh_view(self) -> None:
        active = self.state.active_player
        if self.state.is_over:
            self.header.setText(f"Game over: {self.state.winner} wins")
        else:
            self.header.setText(f"Turn {active.turn} | {active.name} to act")
        self.status.setText(f"Turn clock: per {self.state.turn_advance}")

        for view, player in zip(self.player_views, self.state.players):
            view.setPlainText("\n".join(self._player_lines(player)))
        for button in self.action_buttons:
            button.setEnabled(not self.state.is_over)


def run_gui() -> int:
    app = QApplication(sys.argv)
    window = ArchaemaniaWindow()
    window.show()
    return app.exec()


def main() -> None:
    raise SystemExit(run_gui())


if __name__ == "__main__":
    main()
