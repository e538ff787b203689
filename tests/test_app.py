import json
import unittest

from app import app as flask_app
import app as app_mod


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type="application/json")

    def test_given_patterns_endpoint_when_requested_then_lists_names(self):
        r = self.client.get("/api/patterns")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        self.assertIn("glider", data["patterns"])

    def test_given_named_pattern_when_new_then_state_returned(self):
        r = self._post("/api/new", {"pattern": "blinker"})
        self.assertEqual(r.status_code, 200)
        state = r.get_json()["state"]
        self.assertEqual(state["generation"], 0)
        self.assertEqual(state["cells"], [[0, 0], [1, 0], [2, 0]])
        self.assertEqual(state["population"], 3)
        self.assertEqual(state["fringe"], 12)
        self.assertEqual(state["text"], "###")

    def test_given_explicit_cells_and_random_when_new_then_used(self):
        r = self._post("/api/new", {"cells": [[5, 5], [5, 5], [-1, 2]]})
        self.assertEqual(r.get_json()["state"]["cells"], [[-1, 2], [5, 5]])
        r2 = self._post("/api/new", {"random": {"width": 6, "height": 6, "density": 1.0, "seed": 1}})
        self.assertEqual(r2.get_json()["state"]["population"], 36)

    def test_given_unknown_pattern_when_new_then_bad_request(self):
        r = self._post("/api/new", {"pattern": "nope"})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["ok"])

    def test_given_state_when_tick_then_next_generation(self):
        state = self._post("/api/new", {"pattern": "blinker"}).get_json()["state"]
        r = self._post("/api/tick", {"state": state})
        self.assertEqual(r.status_code, 200)
        nxt = r.get_json()["state"]
        self.assertEqual(nxt["generation"], 1)
        self.assertEqual(nxt["cells"], [[1, -1], [1, 0], [1, 1]])

        r2 = self._post("/api/tick", {"state": nxt, "steps": 3})
        self.assertEqual(r2.get_json()["state"]["generation"], 4)
        self.assertEqual(r2.get_json()["state"]["cells"], state["cells"])

    def test_given_bad_input_when_tick_then_bad_request(self):
        self.assertEqual(self._post("/api/tick", {}).status_code, 400)
        self.assertEqual(self._post("/api/tick", {"state": {"cells": [[1]]}}).status_code, 400)
        self.assertEqual(self._post("/api/tick", {"state": {"cells": []}, "steps": "x"}).status_code, 400)
        self.assertEqual(self._post("/api/tick", {"state": {"cells": []}, "steps": -1}).status_code, 400)

    def test_given_step_limit_when_exceeded_then_bad_request(self):
        orig = app_mod._max_steps
        app_mod._max_steps = lambda: 5
        try:
            r = self._post("/api/tick", {"state": {"cells": []}, "steps": 6})
            self.assertEqual(r.status_code, 400)
            self.assertIn("between 0 and 5", r.get_json()["error"])
        finally:
            app_mod._max_steps = orig

    def test_given_cell_when_neighbors_then_count_reported(self):
        state = {"cells": [[1, 1], [0, 1], [1, 0]]}
        r = self._post("/api/neighbors", {"state": state, "cell": [0, 0]})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["count"], 3)
        self.assertFalse(data["alive"])
        bad = self._post("/api/neighbors", {"state": state, "cell": "zero"})
        self.assertEqual(bad.status_code, 400)

    def test_given_glider_when_run_then_period_and_displacement_reported(self):
        state = self._post("/api/new", {"pattern": "glider"}).get_json()["state"]
        r = self._post("/api/run", {"state": state, "generations": 10})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["result"]["period"], 4)
        self.assertEqual(data["result"]["displacement"], [1, 1])
        self.assertTrue(data["result"]["spaceship"])
        self.assertEqual(data["state"]["generation"], 4)

    def test_given_non_object_body_when_posted_then_bad_request(self):
        for url in ("/api/new", "/api/tick", "/api/neighbors", "/api/run"):
            for payload in ([1, 2], "blinker", 7):
                r = self._post(url, payload)
                self.assertEqual(r.status_code, 400, (url, payload))
                data = r.get_json()
                self.assertFalse(data["ok"])
                self.assertIn("JSON object", data["error"])

    def test_given_soup_limit_when_exceeded_then_bad_request(self):
        orig = app_mod._max_soup
        app_mod._max_soup = lambda: 100
        try:
            r = self._post("/api/new", {"random": {"width": 11, "height": 10, "seed": 1}})
            self.assertEqual(r.status_code, 400)
            self.assertIn("at most 100", r.get_json()["error"])
            ok = self._post("/api/new", {"random": {"width": 10, "height": 10, "density": 1, "seed": 1}})
            self.assertEqual(ok.status_code, 200)
            self.assertEqual(ok.get_json()["state"]["population"], 100)
        finally:
            app_mod._max_soup = orig

    def test_given_non_boolean_stop_flag_when_run_then_bad_request(self):
        state = {"cells": [[0, 0], [1, 0], [2, 0]]}
        r = self._post("/api/run", {"state": state, "generations": 4, "stopOnRepeat": "false"})
        self.assertEqual(r.status_code, 400)
        r2 = self._post("/api/run", {"state": state, "generations": 4, "stopOnRepeat": False})
        self.assertEqual(r2.status_code, 200)
        d2 = r2.get_json()
        self.assertIsNone(d2["result"]["period"])
        self.assertEqual(d2["result"]["generations"], 4)

    def test_given_non_integer_coordinates_when_posted_then_bad_request(self):
        self.assertEqual(self._post("/api/new", {"cells": [[1.7, 0]]}).status_code, 400)
        self.assertEqual(self._post("/api/new", {"cells": [[True, 0]]}).status_code, 400)
        self.assertEqual(self._post("/api/tick", {"state": {"cells": [[0, 2.5]]}}).status_code, 400)
        self.assertEqual(self._post("/api/tick", {"state": {"cells": [], "generation": 1.5}}).status_code, 400)
        self.assertEqual(self._post("/api/tick", {"state": {"cells": []}, "steps": 1.9}).status_code, 400)
        r = self._post("/api/neighbors", {"state": {"cells": []}, "cell": [0.5, 0]})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(self._post("/api/new", {"random": {"width": 4.5, "height": 4}}).status_code, 400)


if __name__ == "__main__":
    unittest.main()
