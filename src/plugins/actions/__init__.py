"""
Action package.

Actions implement the three-stage read/check/do contract every
provisioning plugin exposes to the orchestrator.
"""

from plugins.actions.base import Action, ActionPolicy, BatchAction, run_action

__all__ = ["Action", "ActionPolicy", "BatchAction", "run_action"]
