from django.urls import path
from . import views

app_name = 'teams'

urlpatterns = [
    # GET   /api/teams/{team_id}/dispute-settings/  - Read dispute settings (member)
    # PATCH /api/teams/{team_id}/dispute-settings/  - Change dispute settings (admin)
    path('<uuid:team_id>/dispute-settings/', views.dispute_settings, name='dispute-settings'),
]
