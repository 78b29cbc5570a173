"""
URL configuration for config project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    path('api/', include('apps.records.urls')),

    # Frontend pages
    path('', RedirectView.as_view(pattern_name='dashboard:index', permanent=False), name='home'),
    path('dashboard/', include('apps.dashboard.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
