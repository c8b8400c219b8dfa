import dataclasses
import unittest

from elevator_core.reports import BuildingReport, ElevatorReport
from elevator_core.request import Request
from elevator_core.status import Direction, SystemStatus


def elevator_report(**overrides):
    values = dict(
        elevator_id=0,
        current_floor=0,
        direction=Direction.UP,
        door_closed=False,
        floor_requests=(False,) * 10,
        door_open_timer=5,
        end_wait_timer=5,
        taking_requests=True,
        out_of_service=False,
    )
    values.update(overrides)
    return ElevatorReport(**values)


class ElevatorReportTest(unittest.TestCase):
    def test_waiting_rendering(self):
        self.assertEqual(str(elevator_report()), "Waiting[Floor 0, Time 5]")

    def test_out_of_service_rendering(self):
        report = elevator_report(out_of_service=True, current_floor=4, direction=Direction.DOWN)
        self.assertEqual(str(report), "Out of Service[Floor 4]")

    def test_moving_rendering(self):
        report = elevator_report(
            current_floor=6,
            direction=Direction.DOWN,
            door_closed=True,
            floor_requests=(True, False, False, True, False, False),
            door_open_timer=0,
            end_wait_timer=0,
            taking_requests=False,
        )
        self.assertEqual(str(report), "[6|v|C]< 0 -- -- 3 -- -- >")

    def test_arrow_uses_travel_direction_when_given(self):
        report = elevator_report(
            current_floor=3,
            direction=Direction.UP,
            travel_direction=Direction.DOWN,
            door_closed=True,
            floor_requests=(False, True, False, True),
            door_open_timer=0,
            end_wait_timer=0,
            taking_requests=False,
        )
        self.assertEqual(str(report), "[3|v|C]< -- 1 -- 3 >")
        self.assertEqual(report.to_dict()["direction"], "up")
        self.assertEqual(report.to_dict()["travel_direction"], "down")

    def test_dwell_rendering(self):
        report = elevator_report(
            current_floor=2,
            direction=Direction.STOPPED,
            floor_requests=(False, False, False, True),
            door_open_timer=2,
            end_wait_timer=0,
            taking_requests=False,
        )
        self.assertEqual(str(report), "[2|-|O]< -- -- -- 3 >")

    def test_to_dict_lists_stop_floors(self):
        data = elevator_report(floor_requests=(False, True, False, True)).to_dict()
        self.assertEqual(data["stops"], [1, 3])
        self.assertEqual(data["direction"], "up")


class BuildingReportTest(unittest.TestCase):
    def setUp(self):
        self.report = BuildingReport(
            num_floors=10,
            num_elevators=2,
            elevator_capacity=4,
            elevator_reports=(elevator_report(), elevator_report(elevator_id=1)),
            up_requests=(Request(1, 2),),
            down_requests=(Request(7, 3), Request(9, 0)),
            system_status=SystemStatus.RUNNING,
        )

    def test_rendering(self):
        expected = (
            "Building Report:\nNumber of Floors: 10"
            "\nNumber of Elevators: 2"
            "\nElevator Capacity: 4"
            "\nElevator System Status: Running\nUp Requests: [1->2]"
            "\nDown Requests: [7->3, 9->0]\nElevator Reports: \n"
            "Elevator 0: Waiting[Floor 0, Time 5]"
            "\nElevator 1: Waiting[Floor 0, Time 5]\n"
        )
        self.assertEqual(str(self.report), expected)

    def test_to_dict(self):
        data = self.report.to_dict()
        self.assertEqual(data["system_status"], "Running")
        self.assertEqual(data["down_requests"], [[7, 3], [9, 0]])
        self.assertEqual(len(data["elevators"]), 2)

    def test_reports_are_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.report.system_status = SystemStatus.STOPPING

    def test_out_of_service_status_rendering(self):
        self.assertEqual(str(SystemStatus.OUT_OF_SERVICE), "Out Of Service")


if __name__ == "__main__":
    unittest.main()
