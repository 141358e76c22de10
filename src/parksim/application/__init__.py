"""Application layer: use-case service, DTOs and the simulation clock"""
