"""Earlier variant of the dining philosophers simulation, with per-turn death watches."""