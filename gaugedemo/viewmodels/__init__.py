"""ViewModel package for UI state and command surfaces.

Call context:
    ``gaugedemo/app/main.py`` imports concrete viewmodels from this package to
    bind view callbacks and driver hooks to state transitions.

Dependencies:
    Modules in this package depend on domain types and the animation driver
    only. Widgets and the Tk event loop remain outside.

Responsibilities:
    - Expose mutable UI state and command intent callbacks.
    - Parse raw input text into the values the driver expects.
    - Transform driver samples into view-facing DTOs.
"""
