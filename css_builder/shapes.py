from dataclasses import dataclass


@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
