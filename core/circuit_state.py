# core/circuit_state.py

"""
Módulo: circuit_state
=====================

Estado do circuito RLC manipulado pela calculadora.

Cada grandeza (R, L, C, f, Q) é guardada junto com um flag "conhecido".
Um valor só pode ser lido depois de ter sido informado pelo usuário ou
calculado pelo solver; enquanto o flag estiver falso o conteúdo é
considerado lixo e nunca deve ser usado em cálculo ou exibição.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Ordem canônica das grandezas (também usada na exibição)
PARAMETER_NAMES = ("R", "L", "C", "f", "Q")


class InsufficientDataError(ValueError):
    """Faltam valores conhecidos para a operação pedida."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(f"Valores desconhecidos: {', '.join(self.missing)}")


@dataclass
class CircuitState:
    """
    Valores do circuito em unidades SI (Ω, H, F, Hz) e seus flags.

    O estado vive durante toda a execução: é criado zerado, alterado pela
    entrada do usuário ou pelo solver e nunca é reiniciado.
    """

    values: dict = field(default_factory=lambda: {name: 0.0 for name in PARAMETER_NAMES})
    known: dict = field(default_factory=lambda: {name: False for name in PARAMETER_NAMES})

    @staticmethod
    def _check_name(name: str) -> None:
        if name not in PARAMETER_NAMES:
            raise KeyError(f"Grandeza desconhecida: {name!r}")

    def set(self, name: str, value: float) -> None:
        self._check_name(name)
        self.values[name] = float(value)
        self.known[name] = True

    def get(self, name: str) -> float:
        self._check_name(name)
        if not self.known[name]:
            raise InsufficientDataError([name])
        return self.values[name]

    def is_known(self, *names: str) -> bool:
        for name in names:
            self._check_name(name)
        return all(self.known[name] for name in names)

    def require(self, *names: str) -> None:
        """Levanta InsufficientDataError listando as grandezas que faltam."""
        missing = [name for name in names if not self.is_known(name)]
        if missing:
            raise InsufficientDataError(missing)

    def known_names(self) -> tuple:
        return tuple(name for name in PARAMETER_NAMES if self.known[name])

    def snapshot(self) -> dict:
        """Apenas os valores conhecidos."""
        return {name: self.values[name] for name in self.known_names()}
