#
# Copyright (c) 2014 - 2026  StorPool.
# All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
""" Type definition and validation functions.

Each attribute of a ZAPI record is described by a NaType: a name for
error messages, a validator that turns a Python value into the stored
one, a default value factory, and a pair of functions that convert the
stored value to and from the element tree produced by xmltodict.
Record types also carry their own element name in xmlTag so that a
field may be wrapped in it, e.g. <query><lun-info>...</lun-info></query>.
"""

import collections
import functools
import inspect
import re

from . import nacatch
from . import naxml


NaType = collections.namedtuple('NaType', [
    'name',
    'handleVal',
    'defaultVal',
    'toXml',
    'fromXml',
    'xmlTag',
])


RE_UPPER = re.compile('([A-Z])')


def xmlName(attrName):
    """ Convert a camelCase attribute name to a ZAPI element name. """
    return RE_UPPER.sub(lambda m: '-' + m.group(1).lower(), attrName)


def scalarToXml(val):
    if isinstance(val, bool):
        return 'true' if val else 'false'
    return str(val)


def scalarFromXml(node):
    if isinstance(node, dict):
        return node.get('#text')
    return node


def stringFromXml(node):
    """ An empty element is an empty string, not a missing one. """
    node = scalarFromXml(node)
    return '' if node is None else node


def parseBool(val):
    if isinstance(val, bool):
        return val
    if val in ('true', 'false'):
        return val == 'true'
    nacatch.error('Invalid boolean value {val!r}', val=val)


def parseInt(val):
    if isinstance(val, bool):
        nacatch.error('Invalid integer value {val!r}', val=val)
    return int(val)


def parseStr(val):
    if val is None:
        nacatch.error('No string value specified')
    if isinstance(val, bool):
        return scalarToXml(val)
    return str(val)


naScalarTypes = {
    bool: ('bool', parseBool, scalarFromXml),
    int: ('int', parseInt, scalarFromXml),
    float: ('float', float, scalarFromXml),
    str: ('string', parseStr, stringFromXml),
}


def xmlList(itemType, itemTag=None):
    """ A list of values, serialized as repeated itemTag elements. """
    subType = naType(itemType)
    if itemTag is None:
        itemTag = subType.xmlTag
    assert itemTag is not None, \
        "xmlList({0}) needs an item element name".format(subType.name)
    valT = subType.handleVal
    name = "[{0}]".format(subType.name)

    def buildList(xs):
        if isinstance(xs, (str, dict, naxml.XmlObjectImpl)) or \
                not hasattr(xs, '__iter__'):
            nacatch.error('Expected a list of {name}, got {val!r}',
                          name=subType.name, val=xs)
        lst = []
        exc = functools.reduce(
            lambda exc, x: nacatch.na_catch(
                lst.append,
                lambda: valT(x),
                exc),
            xs,
            None)
        nacatch.na_caught(exc, name, lst)
        return lst

    def toXml(xs):
        return {itemTag: [subType.toXml(x) for x in xs]}

    def fromXml(node):
        if node is None:
            return []
        if not isinstance(node, dict):
            nacatch.error('Expected a list of <{tag}> elements, got {node!r}',
                          tag=itemTag, node=node)
        if itemTag not in node:
            return []
        items = node[itemTag]
        if not isinstance(items, list):
            items = [items]

        lst = []
        exc = functools.reduce(
            lambda exc, item: nacatch.na_catch(
                lst.append,
                lambda: subType.fromXml(item),
                exc),
            items,
            None)
        nacatch.na_caught(exc, name, lst)
        return lst

    return NaType(name, buildList, lambda: [], toXml, fromXml, None)


def maybe(val):
    subType = naType(val)

    def validate(val):
        """Validate the supplied value, possibly None."""
        if val is None:
            return None
        return subType.handleVal(val)

    name = "Optional({0})".format(subType.name)
    return NaType(name, validate, lambda: None,
                  subType.toXml, subType.fromXml, subType.xmlTag)


def wrapped(val, tag):
    """ A single value nested in one more element, e.g. <x><tag>v</tag></x>. """
    return naType(val)._replace(xmlTag=tag)


def naTypeFun(argName, validator):
    return NaType(argName, validator,
                  lambda: nacatch.error("No default value for {argName}",
                                        argName=argName),
                  scalarToXml, stringFromXml, None)


def naType(tp):
    if isinstance(tp, NaType):
        return tp
    elif inspect.isclass(tp) and issubclass(tp, naxml.XmlObjectImpl):
        return NaType(tp.__name__, tp,
                      lambda: nacatch.error("No default value for {type}",
                                            type=tp.__name__),
                      lambda val: val.to_xml(), tp.from_xml, tp.xmlTag)
    elif isinstance(tp, list):
        assert len(tp) == 1, "XmlList :: [recordType]"
        return xmlList(tp[0])
    elif tp in naScalarTypes:
        name, validator, fromXml = naScalarTypes[tp]
        return NaType(name, validator,
                      lambda: nacatch.error("No default value for {type}",
                                            type=name),
                      scalarToXml, fromXml, None)
    else:
        raise TypeError("Cannot build a ZAPI type out of {0!r}".format(tp))


class XmlObject(object):
    """ Turn a class into a ZAPI record with the specified attributes.

    Attribute names are camelCase versions of the element names;
    a class may override the mapping through an xmlTags dictionary.
    A class that represents a command or a named record type also
    sets xmlTag to its own element name. """

    def __init__(self, **kwargs):
        self.attrDefs = dict(
            (argName, naType(argVal))
            for argName, argVal in kwargs.items())

    def __call__(self, cls):
        if issubclass(cls, naxml.XmlObjectImpl):
            attrDefs = dict(cls.__xmlAttrDefs__)
            attrDefs.update(self.attrDefs)
            overrides = dict(cls.__xmlTags__)
        else:
            attrDefs = self.attrDefs
            overrides = {}
        overrides.update(cls.__dict__.get('xmlTags', {}))
        tags = dict(
            (attrName, overrides.get(attrName, xmlName(attrName)))
            for attrName in attrDefs)

        _doc = ""
        if cls.__doc__ is not None:
            _doc += cls.__doc__
        else:
            _doc += "{0}.{1}".format(cls.__module__, cls.__name__)
        _doc += "\n\n"
        _doc += "    XML elements:\n"
        for attrName, attrType in sorted(attrDefs.items()):
            _doc += "        {name} <{tag}>: {type}\n".format(
                name=attrName, tag=tags[attrName], type=attrType.name)
        _doc += "\n"

        return type(cls.__name__, (cls, naxml.XmlObjectImpl),
                    dict(__xmlAttrDefs__=attrDefs, __xmlTags__=tags,
                         __module__=cls.__module__, __doc__=_doc))
