"""Application composition layer for the Tkinter GUI.

The app wires the views, the gauge view model, the animation driver, and the
Tk-backed frame ticker into a runnable desktop window without placing
animation logic in views.
"""
