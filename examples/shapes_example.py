from overloadkit import overload, signature, Variadic, DispatchError

class Circle:
    def __init__(self, r):
        self.r = r

class Rectangle:
    def __init__(self, w, h):
        self.w, self.h = w, h

@overload
def area(shape: Circle) -> float:
    return 3.141592653589793 * shape.r ** 2

@overload
def area(shape: Rectangle) -> float:
    return shape.w * shape.h

@overload
@signature(Variadic(Circle))
def area(*shapes) -> float:
    return sum(3.141592653589793 * shape.r ** 2 for shape in shapes)

def shapes_example():

    print('circle:     ', area(Circle(1.)))
    print('rectangle:  ', area(Rectangle(2., 3.)))
    print('3 circles:  ', area(Circle(1.), Circle(1.), Circle(2.)))
    try:
        area(Circle(1.), Rectangle(1., 1.))
    except DispatchError as e:
        print(e)

if __name__ == '__main__':
    shapes_example()
