"""
XPath属性绑定层 - 声明式地把领域对象字段绑定到XPath查询

职责：
1. 每个领域类型用类属性声明 字段名 -> (XPath, 提取模式, 元素类型)
2. 通用解析器 resolve() 解释声明：标量 / 列表 / 键控字典
3. 元素类型可以是基本类型(str/int/float)或另一个 XmlObject 子类（可任意层级嵌套）

使用方式：
    class Bibl(TeiXmlObject):
        title = xml_attr("t:title")
        references = xml_map("t:ref", key_xpath="@type", as_type="Reference")

    Bibl.bindings()  # {"title": Binding(...), "references": Binding(...)}

字符串形式的 as_type 按 "模块.类限定名" 查找：裸类名相对声明类所在模块，
跨模块引用写完整路径。同名类定义在其他模块不会相互覆盖。

测试要点：
- test_scalar_missing_is_none: 标量查询无结果返回None
- test_list_preserves_order: 列表保持文档顺序
- test_map_last_key_wins: 重复键后者覆盖
- test_invalid_number: 数值解析失败抛 InvalidZoneGeometry
- test_same_name_other_module: 同名类不覆盖已注册类型
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, ClassVar

from lxml import etree

from ..interfaces import InvalidZoneGeometry

TEI_NAMESPACE = "http://www.tei-c.org/ns/1.0"
TEI_NS = {"t": TEI_NAMESPACE}


class BindingMode(str, Enum):
    """提取模式"""
    SCALAR = "scalar"
    LIST = "list"
    MAP = "map"


@dataclass(frozen=True)
class Binding:
    """字段绑定声明"""
    xpath: str
    mode: BindingMode = BindingMode.SCALAR
    as_type: Any = str  # str/int/float、XmlObject子类，或其类名（允许自引用/前向引用）
    key_xpath: str | None = None  # 仅MAP模式：每个匹配节点上求值得到字典键

    def __post_init__(self) -> None:
        if self.mode is BindingMode.MAP and not self.key_xpath:
            raise ValueError(f"键控绑定缺少key_xpath: {self.xpath}")


class XmlAttr:
    """绑定描述符：访问时按声明对实例元素求值"""

    def __init__(self, binding: Binding) -> None:
        self.binding = binding
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        # 裸类名相对声明类所在模块解析；带点的名字视为完整路径
        as_type = self.binding.as_type
        if isinstance(as_type, str) and "." not in as_type:
            self.binding = replace(self.binding, as_type=f"{owner.__module__}.{as_type}")

    def __get__(self, instance: XmlObject | None, owner: type) -> Any:
        if instance is None:
            return self
        return resolve(instance.element, self.binding, instance.namespaces)


def xml_attr(xpath: str, as_type: Any = str) -> XmlAttr:
    """声明标量字段"""
    return XmlAttr(Binding(xpath, BindingMode.SCALAR, as_type))


def xml_list(xpath: str, as_type: Any = str) -> XmlAttr:
    """声明列表字段"""
    return XmlAttr(Binding(xpath, BindingMode.LIST, as_type))


def xml_map(xpath: str, key_xpath: str, as_type: Any = str) -> XmlAttr:
    """声明键控字典字段"""
    return XmlAttr(Binding(xpath, BindingMode.MAP, as_type, key_xpath))


# "模块.类限定名" -> XmlObject子类，供字符串形式的 as_type 延迟查找
_registry: dict[str, type[XmlObject]] = {}


class XmlObject:
    """绑定到单个XML元素的类型化视图"""

    namespaces: ClassVar[dict[str, str]] = {}
    __bindings__: ClassVar[dict[str, Binding]] = {}

    def __init__(self, element: etree._Element) -> None:
        self.element = element

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        bindings: dict[str, Binding] = {}
        for base in reversed(cls.__mro__[1:]):
            bindings.update(getattr(base, "__bindings__", {}))
        for name, attr in vars(cls).items():
            if isinstance(attr, XmlAttr):
                bindings[name] = attr.binding
        cls.__bindings__ = bindings
        _registry[f"{cls.__module__}.{cls.__qualname__}"] = cls

    @classmethod
    def bindings(cls) -> dict[str, Binding]:
        """该类型的完整绑定表（含继承）"""
        return dict(cls.__bindings__)

    def resolve(self, name: str) -> Any:
        """按字段名求值"""
        return resolve(self.element, self.__bindings__[name], self.namespaces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XmlObject):
            return NotImplemented
        return self.element is other.element

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.element.tag}>"


class TeiXmlObject(XmlObject):
    """TEI命名空间下的XmlObject"""
    namespaces = TEI_NS


def resolve(
    element: etree._Element,
    binding: Binding,
    namespaces: dict[str, str] | None = None,
) -> Any:
    """对元素求值一个绑定声明"""
    result = element.xpath(binding.xpath, namespaces=namespaces or {})

    if binding.mode is BindingMode.LIST:
        return [convert(node, binding.as_type) for node in _as_nodes(result)]

    if binding.mode is BindingMode.MAP:
        mapping: dict[Any, Any] = {}
        for node in _as_nodes(result):
            key = _first(node.xpath(binding.key_xpath, namespaces=namespaces or {}))
            # 键不保证唯一：后者覆盖
            mapping[convert(key, str)] = convert(node, binding.as_type)
        return mapping

    # count()/string() 等表达式直接返回数值或字符串
    node = _first(result)
    if node is None:
        return None
    return convert(node, binding.as_type)


def convert(node: Any, as_type: Any = str) -> Any:
    """把XPath结果节点转换为目标类型"""
    if node is None:
        return None

    target = _lookup_type(as_type)
    if isinstance(target, type) and issubclass(target, XmlObject):
        return target(node)

    if isinstance(node, (int, float)) and not isinstance(node, bool):
        if target is int:
            return int(node)
        if target is float:
            return float(node)
        return str(int(node)) if float(node).is_integer() else str(node)

    text = _text(node)
    if target is int:
        try:
            return int(text.strip())
        except ValueError as e:
            raise InvalidZoneGeometry(f"无法解析为整数: {text!r}") from e
    if target is float:
        try:
            value = float(text.strip())
        except ValueError as e:
            raise InvalidZoneGeometry(f"无法解析为数值: {text!r}") from e
        if not math.isfinite(value):
            raise InvalidZoneGeometry(f"数值非有限: {text!r}")
        return value
    return text


def _lookup_type(as_type: Any) -> Any:
    if isinstance(as_type, str):
        try:
            return _registry[as_type]
        except KeyError as e:
            raise LookupError(f"未注册的XmlObject类型: {as_type}") from e
    return as_type


def _as_nodes(result: Any) -> list[Any]:
    if isinstance(result, list):
        return result
    return [result]


def _first(result: Any) -> Any:
    if isinstance(result, list):
        return result[0] if result else None
    return result


def _text(node: Any) -> str:
    """元素取全部文本内容，属性/文本节点取字符串值"""
    if isinstance(node, etree._Element):
        return "".join(node.itertext())
    return str(node)
