"""Mini README: Utility helpers shared across the budget tracker."""
