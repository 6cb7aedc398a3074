# core/exporter.py

"""
Módulo: exporter
================

Exporta os resultados do circuito para um arquivo texto com data/hora.

O texto completo é montado em memória antes de abrir o arquivo; se a
abertura falhar o OSError sobe para quem chamou e nenhum arquivo parcial
é deixado para trás.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from core.circuit_state import CircuitState
from core.units import conversion_lines, format_fixed

# Grandezas obrigatórias para exportar (Q é opcional)
REQUIRED_FOR_EXPORT = ("R", "L", "C", "f")


def format_timestamp(now: datetime) -> str:
    """Data e hora locais sem zeros à esquerda: 2024-3-7 9:5:3."""
    return f"{now.year}-{now.month}-{now.day} {now.hour}:{now.minute}:{now.second}"


def render_results(state: CircuitState, now: datetime | None = None) -> str:
    """Conteúdo do arquivo de exportação (levanta InsufficientDataError se faltar algo)."""
    state.require(*REQUIRED_FOR_EXPORT)
    if now is None:
        now = datetime.now()

    lines = [
        f"Résultats calculés (Date : {format_timestamp(now)}):",
        f"R = {format_fixed(state.get('R'))} Ohms",
        f"f = {format_fixed(state.get('f'))} Hz",
        f"L = {format_fixed(state.get('L'))} H",
        f"C = {format_fixed(state.get('C'))} F",
    ]

    if state.is_known("Q"):
        lines.append(f"Facteur de qualité Q = {format_fixed(state.get('Q'))}")

    lines.append("Conversions des unités :")
    lines.extend(conversion_lines(state, verbose=False))

    return "\n".join(lines) + "\n"


def export_results(state: CircuitState, filename, now: datetime | None = None) -> Path:
    """
    Grava os resultados em `filename` (cria ou sobrescreve).

    Parâmetros
    ----------
    state : CircuitState
        Precisa ter R, L, C e f conhecidos.
    filename : str ou Path
        Caminho informado pelo usuário, usado sem sanitização.
    now : datetime, opcional
        Instante do cabeçalho; padrão é a hora local atual.

    Retorno
    -------
    path : Path
        Caminho do arquivo gravado.
    """
    content = render_results(state, now)

    path = Path(filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    return path
