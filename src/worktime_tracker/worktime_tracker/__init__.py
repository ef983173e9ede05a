"""Work-Time Tracker package.

Feature modules (employees, tasks, worktime) each keep a plain model, a
repository protocol with its MySQL implementation and a thin Flask controller.
"""
