from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'records'

router = DefaultRouter()
router.register(r'records', views.DailyRecordViewSet, basename='record')

urlpatterns = [
    # Record ViewSet routes
    # GET    /api/records/         - List all records (newest date first)
    # POST   /api/records/         - Create record
    # GET    /api/records/{id}/    - Get record
    # PUT    /api/records/{id}/    - Partial update (sales, expenses, notes)
    # PATCH  /api/records/{id}/    - Partial update
    # DELETE /api/records/{id}/    - Delete record

    # Include router URLs
    path('', include(router.urls)),
]
