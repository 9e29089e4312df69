"""
URL configuration for the Ledgerline blog API.
"""

from django.urls import path

from .api import api

urlpatterns = [
    path("api/", api.urls),
]
