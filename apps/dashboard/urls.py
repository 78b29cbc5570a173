from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    # GET  /dashboard/                       - Records, totals and entry form
    # POST /dashboard/                       - Add record
    # POST /dashboard/records/{id}/delete/   - Delete record
    path('', views.dashboard, name='index'),
    path('records/<uuid:record_id>/delete/', views.delete, name='delete'),
]
