import numpy as np

from matrixnodes import Port_Any, Port_Matrix

from tests.utils import Port_Ints


class TestPorts():

    def test_any_value(self):
        a = Port_Any("")
        assert a.check_value(1)[0]
        assert a.check_value("None")[0]
        assert a.check_value(None)[0]
        assert a.check_value([])[0]

    def test_int_value(self):
        a = Port_Ints("")
        assert a.check_value(1)[0]
        assert a.check_value(-200)[0]
        assert not a.check_value(None)[0]
        assert not a.check_value([1])[0]

    def test_matrix_value(self):
        a = Port_Matrix("")
        assert a.check_value(np.zeros((2, 3)))[0]
        assert a.check_value(np.array([[1, 2]], dtype=np.int8))[0]
        assert a.check_value(np.zeros((0, 0)))[0]
        assert not a.check_value(np.zeros(2))[0]
        assert not a.check_value(np.zeros((1, 2, 3)))[0]
        assert not a.check_value([[1, 2]])[0]
        assert not a.check_value(np.array([[True]]))[0]

        valid, msg = a.check_value(np.zeros(2))
        assert "two dimensions" in msg

    def test_compatibility(self):
        assert Port_Matrix.can_input_to(Port_Matrix)
        assert Port_Matrix.can_input_to(Port_Any)
        assert Port_Any.can_input_to(Port_Matrix)
        assert not Port_Ints.can_input_to(Port_Matrix)
        assert not Port_Matrix.can_input_to(Port_Ints)

    def test_my_insanity(self):
        a = Port_Any("a port")
        b = Port_Any("b port")
        assert a == b, "Ports define equality by their key (and type), so they should be equal here."
        assert id(a) != id(b), "Ports are two different instances, so they should never be equal here."

        a.set_key('b')
        assert str(a) == '<Port_Any: b>'
        assert str(b) == '<Port_Any: None>'
