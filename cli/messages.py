# cli/messages.py

"""Textos exibidos no console (em francês, como no programa de bancada)."""

from core.resonance_solver import SolverBranch
from core.units import format_fixed

MAIN_MENU = (
    "==== Menu ====\n"
    "1. Spécifier les valeurs connues (R, L, C, f, Q)\n"
    "2. Calculer les valeurs inconnues\n"
    "3. Afficher les conversions des unités\n"
    "4. Exporter les résultats dans un fichier\n"
    "5. Quitter"
)

SPECIFY_MENU = (
    "Quelles valeurs connaissez-vous ?\n"
    "1. Résistance R\n"
    "2. Inductance L\n"
    "3. Capacité C\n"
    "4. Fréquence f\n"
    "5. Facteur de qualité Q\n"
    "6. Terminer la spécification"
)

CHOICE_PROMPT = "Votre choix : "
INVALID_CHOICE = "Choix invalide. Veuillez réessayer."
SPECIFY_DONE = "Spécification terminée."
GOODBYE = "Programme terminé. Au revoir !"

CONVERSIONS_NEED_LC = "Veuillez d'abord calculer ou spécifier les valeurs de L et C."
CONVERSIONS_HEADER = "\nConversions des unités :"

EXPORT_NEED_ALL = "Veuillez calculer toutes les valeurs avant d'exporter."
EXPORT_FILENAME_PROMPT = "Entrez le nom du fichier d'exportation (par exemple, resultats.txt) : "
EXPORT_OPEN_FAILED = "Erreur : Impossible de créer le fichier."

# Rótulo usado no prompt de cada grandeza
INPUT_LABELS = {
    "R": "R (Ohms)",
    "L": "L (Henrys)",
    "C": "C (Farads)",
    "f": "f (Hz)",
    "Q": "Q (Facteur de qualité)",
}

# Cabeçalho e rótulos de cada ramo do solver
BRANCH_HEADERS = {
    SolverBranch.FROM_R_F: "Calculé à partir de R et f :",
    SolverBranch.FROM_L_C: "Calculé à partir de L et C :",
    SolverBranch.FROM_F_C: "Calculé à partir de f et C :",
    SolverBranch.FROM_Q_R_F: "Calculé à partir de Q, R, et f :",
}

SOLVER_FAILURES = {
    SolverBranch.FREQUENCY_REQUIRED: "Fréquence f est nécessaire pour utiliser Q et R.",
    SolverBranch.INSUFFICIENT_DATA: "Pas assez de données pour effectuer les calculs.",
}

RESULT_LABELS = {
    "R": ("Résistance R", "Ohms"),
    "L": ("Inductance L", "H"),
    "C": ("Capacité C", "F"),
    "f": ("Fréquence f", "Hz"),
}


def solve_report(outcome) -> list:
    """Linhas a exibir depois de uma chamada ao solver."""
    if not outcome.changed:
        return [SOLVER_FAILURES[outcome.branch]]

    lines = [BRANCH_HEADERS[outcome.branch]]
    for name, value in outcome.computed.items():
        label, unit = RESULT_LABELS[name]
        lines.append(f"{label} = {format_fixed(value)} {unit}")
    return lines


def export_done(path) -> str:
    return f"Résultats exportés dans le fichier '{path}'."
