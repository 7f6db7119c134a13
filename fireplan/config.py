"""Default configuration for the Flask app.

Every key can be overridden from the environment with a ``FIREPLAN_`` prefix,
e.g. ``FIREPLAN_HORIZON_AGE=95``.
"""


class Config:
    # projections run until this age
    HORIZON_AGE = 100
    # upper bound on the months-to-goal search
    GOAL_CAP_MONTHS = 1200
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
