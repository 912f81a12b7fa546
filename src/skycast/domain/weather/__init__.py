"""Weather domain: locations and forecasts."""
