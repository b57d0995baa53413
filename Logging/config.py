"""
Configuration for logging outputs and post-run plots.
"""

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    # Logging
    save_logs: bool = True
    trace_filename: str = "secant_trace.txt"
    plan_filename: str = "constellation_plan.txt"
    plot_constellation: bool = True
    plot_convergence: bool = False
