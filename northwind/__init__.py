"""Northwind employee record service."""
