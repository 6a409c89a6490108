"""Adapters exposing the ledger to users."""
