"""Worked solutions for course topics, written as Python modules."""