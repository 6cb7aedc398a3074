# core/input_parsing.py

"""
Leitura de valores numéricos digitados pelo usuário.

`read` e `write` são injetáveis (padrão: input/print) para que o menu e
os testes usem a mesma rotina.
"""

from __future__ import annotations


def parse_float(text, default=None):
    """Converte texto em float aceitando vírgula decimal; `default` se falhar."""
    try:
        if isinstance(text, str):
            text = text.strip().replace(",", ".")
        return float(text)
    except (TypeError, ValueError):
        return default


def parse_int(text, default=None):
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        return default


def collect_positive(label: str, read=input, write=print) -> float:
    """
    Pede um valor estritamente positivo até recebê-lo.

    Entrada não numérica ou <= 0 descarta a linha, mostra o erro e pergunta
    de novo. NaN cai no mesmo caso (não é > 0); não há limite superior.
    """
    while True:
        value = parse_float(read(f"Entrez la valeur de {label} (> 0): "))
        if value is not None and value > 0:
            return value
        write(f"Erreur : {label} doit être strictement supérieur à 0.")
