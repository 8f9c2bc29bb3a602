# Resource repositories
from mms_api.repositories.agent import Agent

__all__ = ["Agent"]
