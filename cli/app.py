# cli/app.py

"""
Módulo: app
===========

Laço de menus da calculadora de ressonância RLC em console.

O menu principal despacha para o submenu de valores conhecidos, para o
solver, para a exibição das conversões e para a exportação. Toda a E/S
passa por `read`/`write`, o que permite roteirizar sessões nos testes.
"""

from enum import Enum, IntEnum

from core.circuit_state import CircuitState, InsufficientDataError
from core.exporter import REQUIRED_FOR_EXPORT, export_results
from core.input_parsing import collect_positive, parse_int
from core.resonance_solver import solve
from core.units import conversion_lines
from cli import messages


class MenuState(Enum):
    MAIN = "main"
    SPECIFY = "specify"
    TERMINATED = "terminated"


class MainChoice(IntEnum):
    SPECIFY = 1
    CALCULATE = 2
    CONVERSIONS = 3
    EXPORT = 4
    QUIT = 5


class SpecifyChoice(IntEnum):
    R = 1
    L = 2
    C = 3
    F = 4
    Q = 5
    FINISH = 6


# Opção do submenu -> grandeza do CircuitState
SPECIFY_TARGETS = {
    SpecifyChoice.R: "R",
    SpecifyChoice.L: "L",
    SpecifyChoice.C: "C",
    SpecifyChoice.F: "f",
    SpecifyChoice.Q: "Q",
}


class RLCCalculatorApp:
    """
    Laço de menus da calculadora.

    Estados: MAIN (menu principal), SPECIFY (submenu de valores conhecidos)
    e TERMINATED. Toda falha é tratada aqui, no ponto da ação do usuário;
    nenhuma exceção escapa de run().
    """

    def __init__(self, state=None, read=None, write=None):
        self.state = state if state is not None else CircuitState()
        self.read = read if read is not None else input
        self.write = write if write is not None else print
        self.menu_state = MenuState.MAIN

        self.actions = {
            MainChoice.SPECIFY: self.enter_specify_menu,
            MainChoice.CALCULATE: self.calculate,
            MainChoice.CONVERSIONS: self.show_conversions,
            MainChoice.EXPORT: self.export,
            MainChoice.QUIT: self.quit,
        }

    def run(self):
        try:
            while self.menu_state is not MenuState.TERMINATED:
                if self.menu_state is MenuState.MAIN:
                    self._main_menu_step()
                else:
                    self._specify_menu_step()
        except (EOFError, KeyboardInterrupt):
            # Fim da entrada padrão: encerra como se fosse "Quitter"
            self.write("")
            self.quit()
        return self.state

    def _read_choice(self, choices):
        number = parse_int(self.read(messages.CHOICE_PROMPT))
        try:
            return choices(number)
        except ValueError:
            self.write(messages.INVALID_CHOICE)
            return None

    # ==================== MENU PRINCIPAL ====================

    def _main_menu_step(self):
        self.write(messages.MAIN_MENU)
        choice = self._read_choice(MainChoice)
        if choice is None:
            return

        try:
            self.actions[choice]()
        except (EOFError, KeyboardInterrupt):
            raise
        except Exception as e:
            self.write(f"[WARN] Falha ao executar a opção {int(choice)}: {e}")

    def enter_specify_menu(self):
        self.write(messages.SPECIFY_MENU)
        self.menu_state = MenuState.SPECIFY

    def calculate(self):
        outcome = solve(self.state)
        for line in messages.solve_report(outcome):
            self.write(line)

    def show_conversions(self):
        try:
            lines = conversion_lines(self.state)
        except InsufficientDataError:
            self.write(messages.CONVERSIONS_NEED_LC)
            return

        self.write(messages.CONVERSIONS_HEADER)
        for line in lines:
            self.write(line)

    def export(self):
        if not self.state.is_known(*REQUIRED_FOR_EXPORT):
            self.write(messages.EXPORT_NEED_ALL)
            return

        filename = ""
        while not filename:
            filename = self.read(messages.EXPORT_FILENAME_PROMPT).strip()

        try:
            path = export_results(self.state, filename)
        except OSError:
            self.write(messages.EXPORT_OPEN_FAILED)
            return

        self.write(messages.export_done(path))

    def quit(self):
        self.write(messages.GOODBYE)
        self.menu_state = MenuState.TERMINATED

    # ==================== SUBMENU DE ESPECIFICAÇÃO ====================

    def _specify_menu_step(self):
        choice = self._read_choice(SpecifyChoice)
        if choice is None:
            return

        if choice is SpecifyChoice.FINISH:
            self.write(messages.SPECIFY_DONE)
            self.menu_state = MenuState.MAIN
            return

        name = SPECIFY_TARGETS[choice]
        value = collect_positive(messages.INPUT_LABELS[name], read=self.read, write=self.write)
        self.state.set(name, value)


def main():
    RLCCalculatorApp().run()
    return 0
