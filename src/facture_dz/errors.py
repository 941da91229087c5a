"""Hiérarchie d'exceptions du moteur de facturation.

FR: Toutes les erreurs sont des violations de préconditions détectées avant
    tout calcul. Le message reprend la première violation rencontrée ;
    la liste complète est disponible dans ``errors``.
EN: All errors are precondition violations detected before any computation.
    The message is the first violation found; the full list is in ``errors``.
"""


class FactureError(Exception):
    """Erreur de base pour toutes les opérations du moteur.

    FR: Classe parente de toutes les exceptions de facturation et de pagination.
    EN: Base class for all billing and pagination exceptions.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors: list[str] = errors or [message]


class InvalidInputError(FactureError):
    """Ligne de facture invalide (quantité, prix ou montant négatif).

    FR: Levée quand une ligne porterait le total dans le négatif.
    EN: Raised when a line item carries a negative quantity, price or amount.
    """


class InvalidRateError(FactureError):
    """Taux hors de l'intervalle [0, 1).

    FR: Remise, R.G., TVA ou timbre négatif ou supérieur ou égal à 100 %.
    EN: Discount, holdback, VAT or stamp rate outside [0, 1).
    """


class InvalidCapacityError(FactureError):
    """Capacité de page invalide (nulle ou négative).

    FR: Le nombre de lignes par page doit être strictement positif.
    EN: The number of items per page must be strictly positive.
    """
