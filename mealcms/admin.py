"""
Meal CMS admin extension point.

Meal CMS registers no ModelAdmin: schemas are data, not models. The only
admin integration is the bootstrap hook, called once by MealCmsConfig.ready()
with the running admin site when 'django.contrib.admin' is installed.

Swap it through settings:

    MEALCMS = {"ADMIN_BOOTSTRAP": "myproject.admin.bootstrap"}
"""

import logging

logger = logging.getLogger(__name__)


def bootstrap(site):
    """
    Admin bootstrap hook.

    Conditional visibility of menu-link fields is declared on the schema
    attributes themselves, so nothing needs registering here. Leaves the
    site untouched and returns None.
    """
    logger.debug("Admin bootstrap hook called")
