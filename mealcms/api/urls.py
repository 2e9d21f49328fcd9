"""
Meal CMS API URLs.

Include this in your project's urlpatterns:

    path('api/mealcms/', include('mealcms.api.urls')),
"""

from rest_framework.routers import DefaultRouter

from .views import ComponentSchemaViewSet, ContentTypeSchemaViewSet

router = DefaultRouter()
router.register("components", ComponentSchemaViewSet, basename="component-schema")
router.register("content-types", ContentTypeSchemaViewSet, basename="content-type-schema")

urlpatterns = router.urls
