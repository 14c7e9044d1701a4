"""Prize campaign administration backend."""
