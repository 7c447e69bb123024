"""Framework-free core: models, calculators, navigation rules and errors."""
