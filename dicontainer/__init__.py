from dicontainer.abc import ContainerProtocol as ContainerProtocol
from dicontainer.abc import TypeIntrospector as TypeIntrospector
from dicontainer.cache import CreatedObject as CreatedObject
from dicontainer.cache import InstanceCache as InstanceCache
from dicontainer.common import inject as inject
from dicontainer.configuration import Binding as Binding
from dicontainer.configuration import DiConfiguration as DiConfiguration
from dicontainer.configuration import Implementation as Implementation
from dicontainer.container import Container as Container
from dicontainer.dependency import Dependency as Dependency
from dicontainer.errors import *  # type: ignore
from dicontainer.generics import GenericBinder as GenericBinder
from dicontainer.introspection import ReflectionIntrospector as ReflectionIntrospector
from dicontainer.lifetime import Lifetime as Lifetime
from dicontainer.provider import DependencyProvider as DependencyProvider
from dicontainer.provider import ResolutionContext as ResolutionContext
