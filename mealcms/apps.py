"""
Meal CMS app configuration.
"""

import logging

from django.apps import AppConfig, apps
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class MealCmsConfig(AppConfig):
    """Meal CMS application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "mealcms"
    verbose_name = _("Meal CMS")

    def ready(self):
        """Load schemas, register system checks and run the admin bootstrap hook."""
        # Import checks to register them
        from mealcms import checks  # noqa: F401
        from mealcms.conf import get_admin_bootstrap, get_schema_modules
        from mealcms.schema import registry

        registry.autodiscover(get_schema_modules())

        hook = get_admin_bootstrap()
        if hook is not None and apps.is_installed("django.contrib.admin"):
            from django.contrib import admin

            hook(admin.site)
