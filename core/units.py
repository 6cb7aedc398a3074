# core/units.py

"""
Módulo: units
=============

Tabelas de unidades da calculadora e geração das linhas de conversão
de L e C.

As tabelas de exibição guardam (símbolo, nome por extenso, fator) onde
o fator converte o valor em SI para a unidade mostrada:

    valor_na_unidade = valor_SI * fator

Componentes cobertos:
- Indutores: henry, mili-henry, micro-henry
- Capacitores: farad, nano-farad, pico-farad
"""

from core.circuit_state import CircuitState

# Casas decimais de todos os valores exibidos/exportados (ponto fixo)
DECIMALS = 12

# =============================
# Unidades de Indutância
# =============================
INDUCTOR_DISPLAY_UNITS = (
    ("H", "Henrys", 1.0),
    ("mH", "millihenrys", 1e3),
    ("µH", "microhenrys", 1e6),
)

# =============================
# Unidades de Capacitância
# =============================
CAPACITOR_DISPLAY_UNITS = (
    ("F", "Farads", 1.0),
    ("nF", "nanofarads", 1e9),
    ("pF", "picofarads", 1e12),
)

CONVERSION_SECTIONS = (
    ("L", "Inductance (L) :", INDUCTOR_DISPLAY_UNITS),
    ("C", "Capacité (C) :", CAPACITOR_DISPLAY_UNITS),
)


def format_fixed(value: float) -> str:
    """Ponto fixo com DECIMALS casas."""
    return f"{value:.{DECIMALS}f}"


def convert(value_SI: float, table) -> list:
    """Retorna [(símbolo, nome, valor convertido), ...] para a tabela dada."""
    return [(symbol, name, value_SI * factor) for symbol, name, factor in table]


def conversion_lines(state: CircuitState, verbose: bool = True) -> list:
    """
    Monta as linhas do bloco de conversões de L e C.

    Exige L e C conhecidos; caso contrário levanta InsufficientDataError
    sem produzir nada. Com `verbose=True` (console) o símbolo vem seguido
    do nome da unidade, ex.: " - 0.001000000000 H (Henrys)". No arquivo
    exportado usa-se `verbose=False`.
    """
    state.require("L", "C")

    lines = []
    for key, title, table in CONVERSION_SECTIONS:
        lines.append(title)
        for symbol, name, value in convert(state.get(key), table):
            unit = f"{symbol} ({name})" if verbose else symbol
            lines.append(f" - {format_fixed(value)} {unit}")
    return lines

