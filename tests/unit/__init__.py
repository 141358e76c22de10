"""Unit tests for the Parking Simulator domain, application and infrastructure layers"""
