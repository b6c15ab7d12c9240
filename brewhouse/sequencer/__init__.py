"""Brewing step sequencer: stage table, state machine, and timer driver."""
