"""Django project package for the workout tracker."""
