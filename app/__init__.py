"""Festival management backend with realtime notification fan-out."""
