"""The three sample programs: house price, iris clustering, taxi fare."""
