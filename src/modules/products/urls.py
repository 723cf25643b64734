"""Product URL configuration.

``/product`` and ``/product/<id>`` without trailing slashes.
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("product", ProductViewSet, basename="product")

urlpatterns = router.urls
