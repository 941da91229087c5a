"""Configuration pytest pour les tests Django.

FR: Configure Django sans base de données pour les tests des paramètres.
EN: Configures Django without a database for settings tests.
"""

import django
from django.conf import settings


def pytest_configure() -> None:
    """Configure Django pour les tests."""
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[
                "facture_dz.contrib.django",
            ],
            USE_TZ=True,
        )
        django.setup()
