"""Prompt templates for proposal generation."""

from .proposal_prompts import PROPOSAL_PROMPT, NOT_SPECIFIED, build_proposal_prompt

__all__ = ["PROPOSAL_PROMPT", "NOT_SPECIFIED", "build_proposal_prompt"]
