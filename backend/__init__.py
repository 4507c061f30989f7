"""Backend: settings and the composition root for the fitness tracker."""
