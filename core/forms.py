"""Forms for the workout dashboard.

Fields accept raw text so that blank or malformed inputs reach
`ledger.validation` and are reported the same way regardless of the browser's
own input constraints.
"""

from __future__ import annotations

from django import forms


class WorkoutForm(forms.Form):
    """Collect the raw workout name and calories text."""

    name = forms.CharField(
        required=False,
        strip=False,
        label="Workout name",
        widget=forms.TextInput(attrs={"id": "workout-name", "placeholder": "e.g. Running"}),
    )
    calories = forms.CharField(
        required=False,
        strip=False,
        label="Calories burned",
        widget=forms.TextInput(attrs={"id": "calories-burned", "inputmode": "numeric", "placeholder": "e.g. 300"}),
    )
