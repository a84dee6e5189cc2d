"""Grouping engine for the block inserter picker."""

from inserter.assembler import PresentationAssembler
from inserter.tab import InserterTab

__all__ = ["InserterTab", "PresentationAssembler"]
