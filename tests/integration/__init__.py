"""
Integration tests for the Parking Simulator

These tests drive the console and the application service together with the
real facility, clock and event bus.
"""
