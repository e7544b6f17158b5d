"""Shared Kernel module.

This module contains foundational components that are explicitly shared across
bounded contexts: the observation context used by every domain probe and the
tenant context resolved from the Host header.
"""
