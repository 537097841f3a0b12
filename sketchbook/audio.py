"""Smoothing of spectrum levels for sound-driven animation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BandSmoother:
    """Follows the mean of a spectrum, jumping up at once and sinking slowly."""

    decay: float = 0.96
    smoothed: float = 0.0
    averaged: float = 0.0

    def feed(self, spectrum) -> float:
        """Take one frame of band levels and return the smoothed level."""
        bands = list(spectrum)
        if not bands:
            raise ValueError("spectrum must hold at least one band")
        self.averaged = sum(bands) / len(bands)
        self.smoothed *= self.decay
        if self.smoothed < self.averaged:
            self.smoothed = self.averaged
        return self.smoothed