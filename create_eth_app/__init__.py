"""Scaffold Ethereum apps from the create-eth-app templates."""
