# src/binwise/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

np = numpy = lazy_module("numpy", install="pip install numpy", reason="numerical arrays")
pd = pandas = lazy_module("pandas", install="pip install pandas", reason="Series/DataFrame input")
sp = scipy = lazy_module("scipy", install="pip install scipy", reason="skewness estimators")

__all__ = [
	"LazyModule", "lazy_module",
	"np", "numpy", "pd", "pandas", "sp", "scipy",
]
