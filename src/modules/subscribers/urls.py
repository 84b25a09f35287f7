"""Subscriber URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.subscribers.views import SubscriberViewSet

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register("subscribers", SubscriberViewSet, basename="subscriber")

urlpatterns = router.urls
