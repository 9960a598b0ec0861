import numpy as np

# every example value of every port class, used to check compatibility between port classes
ALL_VALUES = [
    np.array([[1.0]]),
    np.array([1, 2]),
    [[0, 1], [1, 0]],
    20,
    "Foo",
]


class Port():
    example_values = []

    def __init__(self, label):
        self.label = label

        # set by the contract once the port is bound to a configured stream
        self.key = None

    def set_key(self, key):
        if key is None:
            raise ValueError('Key may not be none')
        self.key = key

    def __str__(self):
        return f"<{self.__class__.__name__}: {self.key}>"

    def __eq__(self, other):
        return type(self) == type(other) \
            and self.key == other.key

    def __hash__(self):
        return hash((type(self), self.key))

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if len(cls.example_values) <= 0:
            raise Exception('Need to provide at least one example value.')

        for val in cls.example_values:
            valid, msg = cls.check_value(val)
            if not valid:
                raise Exception(f'Example value does not pass check ({str(cls)}). Msg: {msg}. Value: {val}')
            if id(val) not in list(map(id, ALL_VALUES)):
                ALL_VALUES.append(val)

    @classmethod
    def check_value(cls, value):
        raise NotImplementedError()

    @classmethod
    def accepts_inputs(cls, example_values):
        return list(map(cls.check_value, example_values))

    @classmethod
    def can_input_to(emit_port_cls, recv_port_cls):
        # any instead of all: a receiving port may accept a subset of what the emitting port produces
        return emit_port_cls == recv_port_cls \
            or any([compatible for compatible, _ in recv_port_cls.accepts_inputs(emit_port_cls.example_values)])


class Port_Any(Port):
    example_values = ALL_VALUES

    @classmethod
    def check_value(cls, value):
        return True, None


class Port_Matrix(Port):
    """
    Dense two dimensional numeric matrix, ie (rows, cols).
    """
    example_values = [
        np.array([[1.0]]),
        np.zeros((2, 3)),
        np.array([[1, 2], [3, 4]]),
    ]

    @classmethod
    def check_value(cls, value):
        if not isinstance(value, np.ndarray):
            return False, f"Should be numpy array; got {type(value)}."
        elif value.ndim != 2:
            return False, f"Should have two dimensions (rows, cols); got shape {value.shape}."
        elif not np.issubdtype(value.dtype, np.number):
            return False, f"Should be numeric; got dtype {value.dtype}."
        return True, None
