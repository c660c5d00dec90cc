"""Backend-independent metric descriptions, options, metric wrappers, timers, drivers and the metrics manager."""