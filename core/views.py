"""Views for the workout dashboard.

Each request is one event: the view starts a `WorkoutSession` from the
visitor's stored workouts, dispatches at most one command, and either renders
the dashboard or redirects back to it.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from core.charting.render import ChartJsBarRenderer
from core.controller import AddWorkout, DeleteWorkout, WorkoutSession
from core.forms import WorkoutForm
from core.listing import ListRenderer
from core.persistence import StoredWorkoutsCorruptError, WorkoutPersistence, configured_storage_key
from core.storage import MappingKeyValueStore
from ledger.validation import WorkoutValidationError

logger = logging.getLogger(__name__)


def _persistence_for(request: HttpRequest) -> WorkoutPersistence:
    """Return the persistence adapter bound to the visitor's session."""

    return WorkoutPersistence(MappingKeyValueStore(request.session), key=configured_storage_key())


def _start_session(request: HttpRequest, *, chart_renderer: ChartJsBarRenderer | None = None) -> WorkoutSession:
    """Start a WorkoutSession for the current request.

    Raises:
        StoredWorkoutsCorruptError: When the visitor's stored workouts are unreadable.
    """

    return WorkoutSession.start(
        persistence=_persistence_for(request),
        list_renderer=ListRenderer(),
        chart_renderer=chart_renderer or ChartJsBarRenderer(),
    )


def _storage_error_response(request: HttpRequest, exc: StoredWorkoutsCorruptError) -> HttpResponse:
    """Render the diagnostic page shown when stored workouts cannot be read."""

    logger.error("Stored workouts are unreadable for session %s", request.session.session_key, exc_info=exc)
    return render(
        request,
        "core/storage_error.html",
        {"storage_key": exc.key, "reason": exc.reason},
        status=500,
    )


@require_GET
def dashboard(request: HttpRequest) -> HttpResponse:
    """Render the form, workouts list, total, and calories chart."""

    chart_renderer = ChartJsBarRenderer()
    try:
        session = _start_session(request, chart_renderer=chart_renderer)
    except StoredWorkoutsCorruptError as exc:
        return _storage_error_response(request, exc)

    context = {
        "form": WorkoutForm(),
        "entries": session.list_renderer.entries,
        "total_calories": session.total_calories,
        "chart_payload": chart_renderer.payload,
    }
    return render(request, "core/dashboard.html", context)


@require_POST
def add_workout(request: HttpRequest) -> HttpResponse:
    """Handle the add-workout form submission."""

    form = WorkoutForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Please enter valid workout details.")
        return redirect("core:dashboard")

    try:
        session = _start_session(request)
    except StoredWorkoutsCorruptError as exc:
        logger.error("Refusing to add a workout over unreadable storage: %s", exc)
        return redirect("core:dashboard")

    try:
        record = session.dispatch(
            AddWorkout(name=form.cleaned_data["name"], calories=form.cleaned_data["calories"])
        )
    except WorkoutValidationError as exc:
        messages.error(request, str(exc))
    else:
        messages.success(request, f"Workout added: {record.name}.")
    return redirect("core:dashboard")


@require_POST
def delete_workout(request: HttpRequest, workout_id: int) -> HttpResponse:
    """Handle activation of a workout's delete control."""

    try:
        session = _start_session(request)
    except StoredWorkoutsCorruptError as exc:
        logger.error("Refusing to delete a workout from unreadable storage: %s", exc)
        return redirect("core:dashboard")

    session.dispatch(DeleteWorkout(workout_id=workout_id))
    return redirect("core:dashboard")


@require_POST
def reset_workouts(request: HttpRequest) -> HttpResponse:
    """Discard the stored workouts (recovery path for unreadable storage)."""

    _persistence_for(request).clear()
    messages.warning(request, "Stored workouts were reset.")
    return redirect("core:dashboard")
