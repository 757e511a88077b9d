from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'disputes'

# Router for ViewSets
router = SimpleRouter()
router.register(r'disputes', views.DisputeViewSet, basename='dispute')

urlpatterns = [
    # Dispute ViewSet routes
    # GET    /api/disputes/{id}/            - Dispute with votes (member)
    # POST   /api/disputes/{id}/vote/       - Vote (member)
    # POST   /api/disputes/{id}/resolve/    - Approve/reject (admin)
    # GET    /api/disputes/{id}/votes/      - List votes (member)
    # GET    /api/disputes/{id}/my-vote/    - Current user's vote

    # Team and fine scoped endpoints
    path('teams/<uuid:team_id>/disputes/', views.team_disputes, name='team-disputes'),
    path('fines/<uuid:fine_id>/dispute/', views.fine_dispute, name='fine-dispute'),

    # Include router URLs
    path('', include(router.urls)),
]
