from django.urls import path
from . import views

app_name = 'activity'

urlpatterns = [
    # GET /api/teams/{team_id}/activity/  - Team activity feed (member)
    path('<uuid:team_id>/activity/', views.team_activity, name='team-activity'),
]
