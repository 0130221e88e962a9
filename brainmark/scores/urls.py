from django.urls import path

from .views import (
    evaluate_view,
    leaderboard_view,
    score_submit_view,
    catalog_view,
)

app_name = "scores"
urlpatterns = [
    path("tests/", view=catalog_view, name="catalog"),
    path("scores/submit/", view=score_submit_view, name="submit"),
    path("leaderboard/<str:test_type>/", view=leaderboard_view, name="leaderboard"),
    path("evaluate/<str:test_type>/", view=evaluate_view, name="evaluate"),
]
