"""Speed check scenario: one radar, two vehicles, completions fired by timers."""

import logging
import threading

from speedradar import Car, LoggingNotifier, MeasurementHandle, Motorcycle, SpeedSensor
from speedradar._logging import configure_file_logging


def finish(handle: MeasurementHandle) -> None:
    reading = handle()
    if reading is not None:
        status = "VIOLATION" if reading.exceeded else "ok"
        print(f"  {reading.vehicle.label}: {reading.speed_kmh:.1f} km/h ({status})")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    handler = configure_file_logging()
    print(f"Logging to {handler.baseFilename}")

    car = (
        Car.builder()
        .model("Uno")
        .color("Branco")
        .door_count(4)
        .year(2020)
        .build()
    )
    motorcycle = Motorcycle.builder().model("CG 160").color("Vermelha").year(2022).build()

    radar = SpeedSensor(70, LoggingNotifier())
    print(f"Radar limit: {radar.display_limit()} km/h")

    # Each timer stands in for the vehicle reaching the second sensor
    timers = [
        threading.Timer(0.060, finish, args=(radar.arm(car),)),
        threading.Timer(0.070, finish, args=(radar.arm(motorcycle),)),
    ]
    for t in timers:
        t.start()
    for t in timers:
        t.join()


if __name__ == "__main__":
    main()
