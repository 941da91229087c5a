"""Intégration Django : paramètres FACTURE_DZ et application."""
