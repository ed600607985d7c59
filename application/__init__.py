"""
Application Layer for the workout timeline service.

This package contains:
- ports/: Abstract repository and catalog interfaces (what the domain needs)
- use_cases/: Workflows for workouts and trainings
"""
