"""Configuration de l'application Django pour le moteur de facturation."""

from django.apps import AppConfig


class FactureDzConfig(AppConfig):
    """Configuration de l'app Django facture-dz."""

    name = "facture_dz.contrib.django"
    label = "facture_dz"
    verbose_name = "Facturation et impression"
