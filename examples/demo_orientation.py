# examples/demo_orientation.py
from placenta3d.geom import Pt
from placenta3d.pipeline import analyze
from placenta3d.pointio import write_point_cloud

if __name__ == "__main__":
    # «матка» — куб 0..10, «плацента» — шматок біля лівої передньої стінки
    uterus = [Pt(x, y, z) for x in range(11) for y in range(11) for z in range(11)]
    placenta = [Pt(x, y, z) for x in range(1, 5) for y in range(0, 4) for z in range(3, 9)]

    write_point_cloud("uterus.txt", uterus)
    write_point_cloud("placenta.txt", placenta)

    result = analyze("placenta.txt", "uterus.txt")
    print("Centroid:", tuple(result.center))
    print(result.report.format())
