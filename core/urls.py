"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.dashboard, name="dashboard"),
    path("workouts/add/", views.add_workout, name="add_workout"),
    path("workouts/<int:workout_id>/delete/", views.delete_workout, name="delete_workout"),
    path("workouts/reset/", views.reset_workouts, name="reset_workouts"),
]
