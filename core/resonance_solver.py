# core/resonance_solver.py
"""
Módulo: resonance_solver
========================

Deduz os valores desconhecidos de um circuito RLC ressonante a partir
dos valores já conhecidos no `CircuitState`.

Fórmulas utilizadas
-------------------
Frequência angular de ressonância:

    ω0 = 2π * f          (quando f é conhecida)
    ω0 = 1 / sqrt(L * C) (quando L e C são conhecidos)

A partir de ω0:

    C = 1 / (R * ω0)
    L = 1 / (ω0² * C)
    R = 1 / (ω0 * C)
    f = ω0 / (2π)

e, no ramo que usa o fator de qualidade:

    L = Q² * C * R²

Ordem de prioridade
-------------------
Os ramos são testados SEMPRE na ordem abaixo e apenas o primeiro que
casar é executado (não há recálculo em cascata):

    1. f e R conhecidos        -> calcula C e L
    2. L e C conhecidos        -> calcula f
    3. f e C conhecidos        -> calcula R
    4. Q e R conhecidos        -> com f: calcula C e L; sem f: nada
    5. nenhum dos anteriores   -> dados insuficientes

A ordem faz parte do comportamento: com R, f e Q conhecidos o ramo 1
ganha do ramo 4 e o Q não entra no cálculo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from core.circuit_state import CircuitState


class SolverBranch(Enum):
    FROM_R_F = "R_f"
    FROM_L_C = "L_C"
    FROM_F_C = "f_C"
    FROM_Q_R_F = "Q_R_f"
    FREQUENCY_REQUIRED = "f_required"
    INSUFFICIENT_DATA = "insufficient"


@dataclass
class SolveOutcome:
    branch: SolverBranch
    computed: dict = field(default_factory=dict)  # nome -> valor, na ordem de exibição

    @property
    def changed(self) -> bool:
        return bool(self.computed)


def _omega_from_frequency(f):
    return 2.0 * np.pi * np.float64(f)


def _solve_from_r_f(state: CircuitState) -> dict:
    R = np.float64(state.get("R"))
    omega0 = _omega_from_frequency(state.get("f"))
    C = 1.0 / (R * omega0)
    L = 1.0 / (omega0 * omega0 * C)
    return {"C": float(C), "L": float(L)}


def _solve_from_l_c(state: CircuitState) -> dict:
    omega0 = 1.0 / np.sqrt(np.float64(state.get("L")) * state.get("C"))
    f = omega0 / (2.0 * np.pi)
    return {"f": float(f)}


def _solve_from_f_c(state: CircuitState) -> dict:
    omega0 = _omega_from_frequency(state.get("f"))
    R = 1.0 / (omega0 * state.get("C"))
    return {"R": float(R)}


def _solve_from_q_r(state: CircuitState) -> dict:
    # Sem f não há ω0: o ramo casa mas não calcula nada
    if not state.is_known("f"):
        return {}

    Q = np.float64(state.get("Q"))
    R = np.float64(state.get("R"))
    omega0 = _omega_from_frequency(state.get("f"))
    C = 1.0 / (R * omega0)
    L = Q * Q * C * R * R
    return {"L": float(L), "C": float(C)}


# (grandezas exigidas, ramo, função de cálculo) na ordem de prioridade
BRANCH_ORDER = (
    (("f", "R"), SolverBranch.FROM_R_F, _solve_from_r_f),
    (("L", "C"), SolverBranch.FROM_L_C, _solve_from_l_c),
    (("f", "C"), SolverBranch.FROM_F_C, _solve_from_f_c),
    (("Q", "R"), SolverBranch.FROM_Q_R_F, _solve_from_q_r),
)


def select_branch(state: CircuitState):
    """Retorna a primeira entrada de BRANCH_ORDER que casa com os flags, ou None."""
    for required, branch, compute in BRANCH_ORDER:
        if state.is_known(*required):
            return required, branch, compute
    return None


def solve(state: CircuitState) -> SolveOutcome:
    """
    Executa UM ramo do solver sobre `state`, alterando-o no lugar.

    Parâmetros
    ----------
    state : CircuitState
        Estado atual do circuito. Os valores calculados são gravados nele
        e marcados como conhecidos.

    Retorno
    -------
    outcome : SolveOutcome
        Ramo executado e dicionário com os valores calculados (vazio quando
        nada foi calculado: frequência ausente no ramo 4 ou dados
        insuficientes).
    """
    selected = select_branch(state)
    if selected is None:
        return SolveOutcome(SolverBranch.INSUFFICIENT_DATA)

    _, branch, compute = selected
    # Aritmética IEEE: overflow/underflow viram inf, 0 ou nan em vez de exceção
    with np.errstate(divide="ignore", over="ignore", under="ignore", invalid="ignore"):
        computed = compute(state)
    if not computed:
        return SolveOutcome(SolverBranch.FREQUENCY_REQUIRED)

    for name, value in computed.items():
        state.set(name, value)

    return SolveOutcome(branch, computed)
